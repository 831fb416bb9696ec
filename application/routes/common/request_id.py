"""
Per-request ids.

Every request gets a short random id that is logged, echoed in JSON bodies
and returned in the ``x-request-id`` response header.
"""

import logging
import secrets

from quart import Quart, Response, g, has_request_context, request

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-request-id"
REQUEST_ID_BYTES = 6


def generate_request_id() -> str:
    """Return 12 lowercase hex characters."""
    return secrets.token_hex(REQUEST_ID_BYTES)


def get_request_id() -> str:
    """Return the current request id, or '-' outside a request."""
    if not has_request_context():
        return "-"
    return getattr(g, "request_id", "-")


def get_client_ip() -> str:
    """Return the forwarded client address, the peer address or '-'."""
    return request.headers.get("X-Forwarded-For") or request.remote_addr or "-"


def register_request_id(app: Quart) -> None:
    """Tag, log and answer every request with a request id."""

    @app.before_request
    async def assign_request_id() -> None:
        g.request_id = generate_request_id()
        logger.info(f"[{g.request_id}] {request.method} {request.path} ip={get_client_ip()}")

    @app.after_request
    async def add_request_id_header(response: Response) -> Response:
        response.headers[REQUEST_ID_HEADER] = get_request_id()
        return response
