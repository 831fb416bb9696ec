"""Domain exceptions shared by routes and services."""

from common.exception.exceptions import (
    AllFilesSkippedError,
    FileCountLimitError,
    FileSizeLimitError,
    GitHubAPIError,
    MissingFieldsError,
    MultipartError,
    NoFilesError,
    UploadError,
)

__all__ = [
    "AllFilesSkippedError",
    "FileCountLimitError",
    "FileSizeLimitError",
    "GitHubAPIError",
    "MissingFieldsError",
    "MultipartError",
    "NoFilesError",
    "UploadError",
]
