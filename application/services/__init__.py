"""
Application services package.

Contains the business logic behind the upload endpoint.
"""

from application.services.upload.service import UploadService

__all__ = ["UploadService"]
