"""Unit tests for GitHubAPIClient."""

import logging
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from application.services.github.api.client import GitHubAPIClient
from common.exception.exceptions import GitHubAPIError


def make_response(status_code, json_body=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    if json_body is None:
        response.content = text.encode()
        response.json = MagicMock(side_effect=ValueError("no json"))
    else:
        response.content = b"{...}"
        response.json = MagicMock(return_value=json_body)
    response.text = text or str(json_body)
    return response


@pytest.fixture
def mock_http():
    """Patch httpx.AsyncClient used by the client module."""
    with patch("application.services.github.api.client.httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client


class TestGitHubAPIClientInit:
    """Test GitHubAPIClient initialization."""

    def test_requires_token(self):
        with pytest.raises(ValueError):
            GitHubAPIClient(token="")

    def test_headers_use_bearer_token(self):
        client = GitHubAPIClient(token="ghp_secret")
        headers = client._get_headers()

        assert headers["Authorization"] == "Bearer ghp_secret"
        assert headers["Accept"] == "application/vnd.github+json"
        assert headers["X-GitHub-Api-Version"] == "2022-11-28"

    def test_custom_base_url(self):
        client = GitHubAPIClient(token="t", base_url="https://ghe.example.com/api/v3/")
        assert client.base_url == "https://ghe.example.com/api/v3"


class TestRequest:
    """Test GitHubAPIClient.request."""

    @pytest.mark.asyncio
    async def test_get_returns_json(self, mock_http):
        mock_http.get.return_value = make_response(200, {"object": {"sha": "abc"}})
        client = GitHubAPIClient(token="t")

        result = await client.get("repos/o/r/git/ref/heads/main")

        assert result == {"object": {"sha": "abc"}}
        url = mock_http.get.await_args.args[0]
        assert url == "https://api.github.com/repos/o/r/git/ref/heads/main"

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self, mock_http):
        mock_http.post.return_value = make_response(201, {"sha": "blob"})
        client = GitHubAPIClient(token="t")

        result = await client.post("repos/o/r/git/blobs", data={"content": "eA==", "encoding": "base64"})

        assert result == {"sha": "blob"}
        assert mock_http.post.await_args.kwargs["json"] == {"content": "eA==", "encoding": "base64"}

    @pytest.mark.asyncio
    async def test_patch_is_supported(self, mock_http):
        mock_http.patch.return_value = make_response(200, {"ref": "refs/heads/main"})
        client = GitHubAPIClient(token="t")

        result = await client.patch("repos/o/r/git/refs/heads/main", data={"sha": "c"})

        assert result == {"ref": "refs/heads/main"}

    @pytest.mark.asyncio
    async def test_empty_body_returns_empty_dict(self, mock_http):
        mock_http.get.return_value = make_response(204, text="")
        client = GitHubAPIClient(token="t")

        assert await client.get("anything") == {}

    @pytest.mark.asyncio
    async def test_error_status_raises_github_error(self, mock_http):
        body = {"message": "Bad credentials", "documentation_url": "https://docs.github.com/rest"}
        mock_http.get.return_value = make_response(401, body)
        client = GitHubAPIClient(token="t")

        with pytest.raises(GitHubAPIError) as exc_info:
            await client.get("repos/o/r/git/ref/heads/main")

        error = exc_info.value
        assert error.status_code == 401
        assert error.message == "Bad credentials"
        assert error.github_message == "Bad credentials"
        assert error.response_data == body

    @pytest.mark.asyncio
    async def test_error_without_json_body(self, mock_http):
        mock_http.get.return_value = make_response(502, text="<html>Bad gateway</html>")
        client = GitHubAPIClient(token="t")

        with pytest.raises(GitHubAPIError) as exc_info:
            await client.get("anything")

        assert exc_info.value.status_code == 502
        assert exc_info.value.github_message is None
        assert "502" in exc_info.value.message
        assert exc_info.value.response_data == "<html>Bad gateway</html>"

    @pytest.mark.asyncio
    async def test_transport_error_has_no_status(self, mock_http):
        mock_http.get.side_effect = httpx.ConnectError("connection refused")
        client = GitHubAPIClient(token="t")

        with pytest.raises(GitHubAPIError) as exc_info:
            await client.get("anything")

        assert exc_info.value.status_code is None
        assert "connection refused" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_unsupported_method(self, mock_http):
        client = GitHubAPIClient(token="t")

        with pytest.raises(ValueError, match="Unsupported HTTP method"):
            await client.request("TRACE", "anything")

    @pytest.mark.asyncio
    async def test_error_body_is_not_logged_by_client(self, mock_http, caplog):
        body = {"message": "Validation Failed", "errors": [{"field": "sha", "code": "secret-detail"}]}
        mock_http.patch.return_value = make_response(422, body)
        client = GitHubAPIClient(token="t")

        with caplog.at_level(logging.DEBUG, logger="application.services.github.api.client"):
            with pytest.raises(GitHubAPIError):
                await client.patch("repos/o/r/git/refs/heads/main", data={"sha": "c"})

        assert "secret-detail" not in caplog.text
        assert not [record for record in caplog.records if record.levelno >= logging.ERROR]
