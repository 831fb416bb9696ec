"""
Rate limiting utilities for route handlers.

Provides standardized rate limit key functions.
"""

from application.routes.common.request_id import get_client_ip


async def default_rate_limit_key() -> str:
    """
    Generate rate limit key based on client IP address.

    Uses the forwarded address so clients behind a proxy are limited
    individually.

    Returns:
        str: Client IP address or "unknown" if not available

    Example:
        >>> @rate_limit(30, timedelta(minutes=1), key_function=default_rate_limit_key)
        >>> async def my_endpoint():
        >>>     pass
    """
    ip = get_client_ip()
    return "unknown" if ip == "-" else ip
