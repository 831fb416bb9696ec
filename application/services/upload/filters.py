"""
Filename handling for uploaded files.

Keeps obvious secrets (dotenv files, session dumps, auth state) out of the
target repository.
"""

from typing import Optional

DEFAULT_FILENAME = "file"

# Exact names that are never uploaded
SENSITIVE_FILENAMES = {".env", "credentials.json"}

# Names starting with any of these are never uploaded
SENSITIVE_PREFIXES = ("session",)

# Names containing any of these are never uploaded
SENSITIVE_SUBSTRINGS = ("auth_info",)


def normalize_filename(filename: Optional[str]) -> str:
    """Return the client filename with Windows separators turned into '/'."""
    return (filename or DEFAULT_FILENAME).replace("\\", "/")


def is_sensitive_filename(name: str) -> bool:
    """Check whether a normalized filename must be skipped."""
    if name in SENSITIVE_FILENAMES:
        return True

    if name.startswith(SENSITIVE_PREFIXES):
        return True

    return any(marker in name for marker in SENSITIVE_SUBSTRINGS)
