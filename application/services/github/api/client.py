"""
GitHub API client for making authenticated requests.
Authenticates with the access token supplied alongside each upload.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from common.config.config import GITHUB_API_TIMEOUT, GITHUB_API_URL, GITHUB_API_VERSION
from common.exception.exceptions import GitHubAPIError

logger = logging.getLogger(__name__)


class GitHubAPIClient:
    """Base client for GitHub REST API interactions."""

    API_VERSION = GITHUB_API_VERSION

    def __init__(self, token: str, base_url: Optional[str] = None):
        """Initialize GitHub API client.

        Args:
            token: GitHub access token (personal or fine-grained)
            base_url: API root, defaults to GITHUB_API_URL (GitHub Enterprise support)
        """
        if not token:
            raise ValueError("GitHub token is required")
        self.token = token
        self.base_url = (base_url or GITHUB_API_URL).rstrip("/")

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for GitHub API requests.

        Returns:
            Headers dictionary
        """
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.API_VERSION,
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: float = GITHUB_API_TIMEOUT,
    ) -> Dict[str, Any]:
        """Make a GitHub API request.

        Args:
            method: HTTP method (GET, POST, PATCH)
            path: API path (without base URL)
            data: Request body data
            params: Query parameters
            timeout: Request timeout in seconds

        Returns:
            Response data (empty dict for empty bodies)

        Raises:
            GitHubAPIError: If the request fails or GitHub rejects it
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        headers = self._get_headers()

        try:
            timeout_config = httpx.Timeout(timeout, connect=60.0)
            response = await self._execute_http_request(
                method, url, headers, data, params, timeout_config
            )
        except httpx.RequestError as e:
            error_msg = f"GitHub API request error: {e}"
            logger.error(error_msg)
            raise GitHubAPIError(None, error_msg) from e

        return self._process_response(response, method, url)

    async def _execute_http_request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[Dict[str, Any]],
        params: Optional[Dict[str, Any]],
        timeout_config: httpx.Timeout,
    ) -> httpx.Response:
        """Execute HTTP request with method routing.

        Raises:
            ValueError: If HTTP method is unsupported
        """
        method_upper = method.upper()

        async with httpx.AsyncClient(timeout=timeout_config, trust_env=False) as client:
            if method_upper == "GET":
                return await client.get(url, headers=headers, params=params)
            elif method_upper == "POST":
                return await client.post(url, json=data, headers=headers, params=params)
            elif method_upper == "PATCH":
                return await client.patch(url, json=data, headers=headers, params=params)
            else:
                raise ValueError(f"Unsupported HTTP method: {method}")

    def _process_response(
        self, response: httpx.Response, method: str, url: str
    ) -> Dict[str, Any]:
        """Process HTTP response and extract data.

        Raises:
            GitHubAPIError: If response status indicates failure
        """
        if response.status_code in (200, 201, 204):
            logger.debug(
                f"GitHub API {method} request to {url} "
                f"successful (status: {response.status_code})"
            )
            if response.content:
                try:
                    return response.json()
                except ValueError:
                    return {}
            return {}

        try:
            body: Any = response.json()
        except ValueError:
            body = response.text or None

        github_message = body.get("message") if isinstance(body, dict) else None
        error_msg = github_message or f"GitHub API request failed (status {response.status_code})"
        # The body is logged once, with the request id, by the error handler
        logger.debug(f"GitHub API {method} {url} failed (status {response.status_code})")
        raise GitHubAPIError(response.status_code, error_msg, body)

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a GET request."""
        return await self.request("GET", path, params=params)

    async def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a POST request."""
        return await self.request("POST", path, data=data)

    async def patch(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a PATCH request."""
        return await self.request("PATCH", path, data=data)
