"""Tests for the GitHub error helpers used by the error handlers."""

import pytest

from application.routes.common.error_handlers import (
    GITHUB_RESPONSE_LOG_LIMIT,
    github_error_status,
    github_response_excerpt,
)
from common.exception.exceptions import GitHubAPIError


class TestGitHubErrorStatus:
    @pytest.mark.parametrize(
        "status, expected",
        [(404, 404), (422, 422), (502, 502), (None, 500), (302, 500), (600, 500)],
    )
    def test_status_forwarding(self, status, expected):
        assert github_error_status(GitHubAPIError(status, "failed")) == expected


class TestGitHubResponseExcerpt:
    def test_json_body_is_serialized(self):
        error = GitHubAPIError(404, "Not Found", {"message": "Not Found"})

        assert github_response_excerpt(error) == '{"message": "Not Found"}'

    def test_text_body_is_kept_verbatim(self):
        error = GitHubAPIError(502, "failed", "<html>Bad gateway</html>")

        assert github_response_excerpt(error) == "<html>Bad gateway</html>"

    def test_long_body_is_cut(self):
        error = GitHubAPIError(500, "failed", "y" * (GITHUB_RESPONSE_LOG_LIMIT * 2))

        assert github_response_excerpt(error) == "y" * GITHUB_RESPONSE_LOG_LIMIT
