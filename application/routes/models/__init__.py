"""
Request/Response Models for API endpoints.

Provides Pydantic models for type-safe request validation.
"""

from .upload_models import UploadForm

__all__ = [
    "UploadForm",
]
