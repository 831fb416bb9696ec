"""
Response utilities for standardized API responses.

Every JSON body carries ``ok`` and the request id ``rid``.
"""

from typing import Any, Dict, Optional, Tuple

from quart import Response, jsonify

from application.routes.common.request_id import get_request_id


class APIResponse:
    """
    Standardized API response helper.

    Ensures consistent response format across all endpoints.
    """

    @staticmethod
    def success(data: Optional[Dict[str, Any]] = None, status: int = 200) -> Tuple[Response, int]:
        """
        Create a successful response.

        Args:
            data: Fields merged into the body next to ``ok`` and ``rid``
            status: HTTP status code (default: 200)

        Example:
            >>> return APIResponse.success({"commit": sha})
        """
        body: Dict[str, Any] = {"ok": True, "rid": get_request_id()}
        body.update(data or {})
        return jsonify(body), status

    @staticmethod
    def error(
        message: str,
        status: int = 400,
        code: str = "ERROR",
        extra: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Response, int]:
        """
        Create an error response.

        Args:
            message: Error message
            status: HTTP status code (default: 400)
            code: Machine readable error code for client-side handling
            extra: Additional fields merged into the body

        Example:
            >>> return APIResponse.error("Pick at least one file.", 400, code="NO_FILES")
            >>> return APIResponse.error("All files skipped", 400, code="ALL_SKIPPED", extra={"skipped": names})
        """
        body: Dict[str, Any] = {
            "ok": False,
            "rid": get_request_id(),
            "code": code,
            "message": message,
        }
        body.update(extra or {})
        return jsonify(body), status

    @staticmethod
    def not_found(resource: str = "Resource") -> Tuple[Response, int]:
        """Create a 404 Not Found response."""
        return APIResponse.error(f"{resource} not found", 404, code="NOT_FOUND")

    @staticmethod
    def internal_error(message: str = "Internal server error") -> Tuple[Response, int]:
        """Create a 500 Internal Server Error response."""
        return APIResponse.error(message, 500, code="INTERNAL_ERROR")
