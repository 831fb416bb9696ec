#!/usr/bin/env python3
"""
Entry point script to run the Repository Uploader.

This script should be run from the project root directory:
    python run.py

Environment variables:
    APP_HOST: Host to bind to (default: 127.0.0.1, or 0.0.0.0 when PORT is set)
    APP_PORT: Port to bind to (default: PORT, then 3000)
    APP_DEBUG: Enable debug mode (default: false)
    APP_TIMEOUT: Keep-alive timeout in seconds (default: 600)
"""
import asyncio
import logging

from hypercorn.asyncio import serve
from hypercorn.config import Config

from common.config.config import APP_DEBUG, APP_HOST, APP_PORT, APP_TIMEOUT

logger = logging.getLogger(__name__)


def build_config() -> Config:
    config = Config()
    config.bind = [f"{APP_HOST}:{APP_PORT}"]

    # Large uploads are slow; keep connections and shutdown generous
    config.keep_alive_timeout = APP_TIMEOUT
    config.shutdown_timeout = APP_TIMEOUT
    config.graceful_timeout = 30

    if APP_DEBUG:
        config.loglevel = "DEBUG"
        config.accesslog = "-"  # Log to stdout
        config.errorlog = "-"

    return config


def main() -> None:
    from application.app import app

    config = build_config()
    logger.info(f"Running on {APP_HOST}:{APP_PORT}")
    logger.info(f"Keep-alive timeout: {APP_TIMEOUT} seconds")
    logger.info(f"Debug mode: {APP_DEBUG}")

    asyncio.run(serve(app, config))


if __name__ == "__main__":
    main()
