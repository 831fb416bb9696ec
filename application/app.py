import logging
import sys

from quart import Quart
from quart_rate_limiter import RateLimiter
from quart_schema import QuartSchema

from application.routes import system_bp, upload_bp
from application.routes.common.error_handlers import register_error_handlers
from application.routes.common.request_id import register_request_id
from common.config.config import (
    APP_LOG_FILE,
    LOG_LEVEL,
    MAX_CONTENT_LENGTH,
    QUART_BODY_TIMEOUT,
    QUART_RESPONSE_TIMEOUT,
)

log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Log to stdout and, when APP_LOG_FILE is set, to that file as well."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if APP_LOG_FILE:
        handlers.append(logging.FileHandler(APP_LOG_FILE, mode="a"))

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format=log_format,
        handlers=handlers,
    )

    # httpx logs every request URL at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_app() -> Quart:
    configure_logging()

    app = Quart(__name__)

    # Large uploads: reading the body and the GitHub call chain can take minutes
    app.config["BODY_TIMEOUT"] = QUART_BODY_TIMEOUT
    app.config["RESPONSE_TIMEOUT"] = QUART_RESPONSE_TIMEOUT
    app.config["MAX_CONTENT_LENGTH"] = MAX_CONTENT_LENGTH

    # Registered first so rate limited requests are tagged too
    register_request_id(app)

    RateLimiter(app)

    QuartSchema(
        app,
        info={"title": "Repository Uploader", "version": "1.0.0"},
        tags=[
            {"name": "Upload", "description": "Commit uploaded files to GitHub"},
            {"name": "System", "description": "System and health endpoints"},
        ],
    )

    register_error_handlers(app)

    app.register_blueprint(system_bp)
    app.register_blueprint(upload_bp)

    return app


app = create_app()
