"""
Exceptions raised while handling an upload.

UploadError subclasses describe requests rejected before any commit is
written; each carries the HTTP status and error code returned to the client.
GitHubAPIError wraps failures reported by (or while reaching) the GitHub API.
"""

from typing import Any, Dict, List, Optional


class UploadError(Exception):
    """Base class for rejected upload requests."""

    status: int = 400
    code: str = "UPLOAD_ERROR"

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}


class MultipartError(UploadError):
    """Raised when the multipart body cannot be parsed."""

    code = "MULTIPART_ERROR"


class FileSizeLimitError(UploadError):
    """Raised when a single file exceeds the per-file size limit."""

    status = 413
    code = "LIMIT_FILE_SIZE"


class FileCountLimitError(UploadError):
    """Raised when the request carries too many files."""

    status = 413
    code = "LIMIT_FILE_COUNT"


class MissingFieldsError(UploadError):
    """Raised when token, owner or repo is missing."""

    code = "MISSING_FIELDS"


class NoFilesError(UploadError):
    """Raised when the request carries no files."""

    code = "NO_FILES"


class AllFilesSkippedError(UploadError):
    """Raised when every file was dropped by the sensitive filename filter."""

    code = "ALL_SKIPPED"

    def __init__(self, skipped: List[str]):
        super().__init__(
            "All files were skipped (e.g. .env/session/auth_info).",
            extra={"skipped": list(skipped)},
        )
        self.skipped = list(skipped)


class GitHubAPIError(Exception):
    """Raised when a GitHub API call fails.

    Attributes:
        status_code: HTTP status returned by GitHub, None for transport errors
        message: Human readable failure message
        response_data: Parsed JSON body returned by GitHub, or its raw text when it is not JSON
    """

    def __init__(
        self,
        status_code: Optional[int],
        message: str,
        response_data: Optional[Any] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.response_data = response_data

    @property
    def github_message(self) -> Optional[str]:
        """The ``message`` field of GitHub's error body, when present."""
        if isinstance(self.response_data, dict):
            return self.response_data.get("message")
        return None
