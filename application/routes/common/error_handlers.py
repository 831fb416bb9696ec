"""
Centralized error handling middleware.

Provides consistent error handling across all routes with automatic
error logging and standardized response format.
"""

import json
import logging

from quart import Quart
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from application.routes.common.request_id import get_request_id
from application.routes.common.response import APIResponse
from common.exception.exceptions import GitHubAPIError, UploadError

logger = logging.getLogger(__name__)

# Upper bound on how much of a GitHub error body ends up in the logs
GITHUB_RESPONSE_LOG_LIMIT = 800


def github_error_status(error: GitHubAPIError) -> int:
    """Forward GitHub's status when it is an HTTP error status, otherwise 500."""
    status = error.status_code
    if status is not None and 400 <= status < 600:
        return status
    return 500


def github_response_excerpt(error: GitHubAPIError) -> str:
    """GitHub's error body as text, cut to GITHUB_RESPONSE_LOG_LIMIT characters."""
    data = error.response_data
    text = data if isinstance(data, str) else json.dumps(data)
    return text[:GITHUB_RESPONSE_LOG_LIMIT]


def register_error_handlers(app: Quart) -> None:
    """
    Register centralized error handlers for the application.

    Handles:
    - UploadError → status and code carried by the exception
    - GitHubAPIError → GitHub's status (or 500), UPLOAD_FAILED
    - RequestEntityTooLarge → 413 PAYLOAD_TOO_LARGE
    - 404 → NOT_FOUND
    - HTTPException (Werkzeug) → Appropriate status
    - Exception (Generic) → 500 Internal Server Error

    Args:
        app: Quart application instance

    Example:
        >>> from quart import Quart
        >>> app = Quart(__name__)
        >>> register_error_handlers(app)
    """

    @app.errorhandler(UploadError)
    async def handle_upload_error(error: UploadError):
        """
        Handle rejected uploads.

        Returns the status and code carried by the exception.
        """
        logger.warning(f"[{get_request_id()}] {error.code}: {error.message}")
        return APIResponse.error(error.message, error.status, code=error.code, extra=error.extra)

    @app.errorhandler(GitHubAPIError)
    async def handle_github_error(error: GitHubAPIError):
        """
        Handle failures of the GitHub call chain.

        Forwards GitHub's status and message so the client sees why the
        commit was refused (bad token, missing branch, conflicting push...).
        """
        rid = get_request_id()
        logger.error(f"[{rid}] exception: {error.status_code} {error.message}")
        if error.response_data is not None:
            logger.error(f"[{rid}] GitHub response: {github_response_excerpt(error)}")

        return APIResponse.error(
            error.message,
            github_error_status(error),
            code="UPLOAD_FAILED",
            extra={
                "github_status": error.status_code,
                "github_message": error.github_message,
            },
        )

    @app.errorhandler(RequestEntityTooLarge)
    async def handle_request_too_large(error: RequestEntityTooLarge):
        """
        Handle request bodies above MAX_CONTENT_LENGTH.

        Returns 413 Payload Too Large.
        """
        logger.warning(f"[{get_request_id()}] request body too large")
        return APIResponse.error(
            "Request body is too large.", 413, code="PAYLOAD_TOO_LARGE"
        )

    @app.errorhandler(404)
    async def handle_not_found(error):
        """
        Handle 404 Not Found errors.

        Returns standardized 404 response.
        """
        logger.info(f"[{get_request_id()}] no route for this path")
        return APIResponse.not_found("Endpoint")

    @app.errorhandler(HTTPException)
    async def handle_http_exception(error: HTTPException):
        """
        Handle Werkzeug HTTP exceptions (404, 405, 429...).

        Preserves the original HTTP status code.
        """
        logger.info(f"[{get_request_id()}] HTTP exception: {error.code} - {error.description}")

        code = (error.name or "HTTP_ERROR").upper().replace(" ", "_")
        response, status = APIResponse.error(
            error.description or error.name, error.code or 500, code=code
        )
        retry_after = getattr(error, "retry_after", None)
        if retry_after is not None:
            response.headers["Retry-After"] = str(retry_after)
        return response, status

    @app.errorhandler(Exception)
    async def handle_generic_exception(error: Exception):
        """
        Handle all uncaught exceptions.

        Returns 500 Internal Server Error.
        Logs full stack trace for debugging.
        """
        logger.exception(f"[{get_request_id()}] Unhandled exception: {error}")

        # In production, hide implementation details
        return APIResponse.internal_error("An unexpected error occurred")
