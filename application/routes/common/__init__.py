"""
Common utilities for route handlers.

Provides shared functionality to reduce code duplication:
- Request id tagging
- Rate limiting utilities
- Response formatting
- Form validation
"""
