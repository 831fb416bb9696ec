"""
Configuration module.

Reads service settings from the environment (and an optional .env file).
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def get_int_env(key: str, default: int) -> int:
    """Get integer environment variable or raise exception if it is malformed."""
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise Exception(f"{key} must be an integer, got {value!r}")


# Server
# PORT is what most PaaS runtimes inject; there the service must listen on all interfaces
APP_HOST = os.getenv("APP_HOST", "0.0.0.0" if os.getenv("PORT") else "127.0.0.1")
APP_PORT = get_int_env("APP_PORT", get_int_env("PORT", 3000))
APP_DEBUG = os.getenv("APP_DEBUG", "false").lower() == "true"
APP_TIMEOUT = get_int_env("APP_TIMEOUT", 600)
APP_LOG_FILE = os.getenv("APP_LOG_FILE")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

QUART_BODY_TIMEOUT = get_int_env("QUART_BODY_TIMEOUT", 600)
QUART_RESPONSE_TIMEOUT = get_int_env("QUART_RESPONSE_TIMEOUT", 600)

# GitHub API
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
GITHUB_API_VERSION = os.getenv("GITHUB_API_VERSION", "2022-11-28")
GITHUB_API_TIMEOUT = float(get_int_env("GITHUB_API_TIMEOUT", 150))

# Upload limits
MAX_UPLOAD_FILE_SIZE = get_int_env("MAX_UPLOAD_FILE_SIZE", 100 * 1024 * 1024)
MAX_UPLOAD_FILES = get_int_env("MAX_UPLOAD_FILES", 300)
MAX_CONTENT_LENGTH = get_int_env("MAX_CONTENT_LENGTH", 512 * 1024 * 1024)
UPLOAD_RATE_LIMIT = get_int_env("UPLOAD_RATE_LIMIT", 30)

# Upload defaults
DEFAULT_BRANCH = os.getenv("DEFAULT_BRANCH", "main")
DEFAULT_COMMIT_MESSAGE = os.getenv("DEFAULT_COMMIT_MESSAGE", "Upload via web uploader")
