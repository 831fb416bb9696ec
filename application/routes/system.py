"""
System Routes

Serves the upload page and liveness endpoints.
"""

import logging

from quart import Blueprint, current_app
from quart_schema import hide

from application.routes.common.response import APIResponse

logger = logging.getLogger(__name__)

system_bp = Blueprint("system", __name__)

INDEX_PAGE = "index.html"


@system_bp.route("/", methods=["GET"])
async def index():
    """Serve the upload page."""
    return await current_app.send_static_file(INDEX_PAGE)


@system_bp.route("/health", methods=["GET"])
async def health():
    """Liveness check."""
    return APIResponse.success()


@system_bp.route("/favicon.ico", methods=["GET"])
@hide
async def favicon() -> tuple[str, int]:
    return "", 204
