"""Upload service: publishes a batch of files to GitHub as one commit."""

from application.services.upload.filters import is_sensitive_filename, normalize_filename
from application.services.upload.models import IncomingFile, UploadResult, UploadTarget
from application.services.upload.service import UploadService

__all__ = [
    "IncomingFile",
    "UploadResult",
    "UploadService",
    "UploadTarget",
    "is_sensitive_filename",
    "normalize_filename",
]
