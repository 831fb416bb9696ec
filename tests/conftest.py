"""Pytest configuration for tests.

Sets up Python path and fixtures for all tests.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import patch

import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from application.services.github.api.client import GitHubAPIClient  # noqa: E402

MULTIPART_BOUNDARY = "----uploader-test-boundary"


def build_multipart(
    fields: Dict[str, str],
    files: List[Tuple[str, bytes]],
    field_name: str = "files",
    closed: bool = True,
) -> Tuple[bytes, Dict[str, str]]:
    """Encode form fields and files as a multipart/form-data body.

    With ``closed=False`` the closing boundary is left off, as when a client
    disconnects partway through the upload.
    """
    parts = []
    for name, value in fields.items():
        parts.append(
            (
                f"--{MULTIPART_BOUNDARY}\r\n"
                f'Content-Disposition: form-data; name="{name}"\r\n\r\n'
                f"{value}\r\n"
            ).encode()
        )
    for filename, content in files:
        header = (
            f"--{MULTIPART_BOUNDARY}\r\n"
            f'Content-Disposition: form-data; name="{field_name}"; filename="{filename}"\r\n'
            "Content-Type: application/octet-stream\r\n\r\n"
        ).encode()
        parts.append(header + content + b"\r\n")
    if closed:
        parts.append(f"--{MULTIPART_BOUNDARY}--\r\n".encode())

    headers = {"Content-Type": f"multipart/form-data; boundary={MULTIPART_BOUNDARY}"}
    return b"".join(parts), headers


@pytest.fixture
def multipart():
    """Return the multipart body builder."""
    return build_multipart


class FakeGitHub:
    """In-memory stand-in for the GitHub Git Data endpoints."""

    def __init__(self):
        self.calls: List[Tuple[str, str, Optional[Dict[str, Any]]]] = []
        self.failures: Dict[Tuple[str, str], Exception] = {}
        self.blob_count = 0

    def fail(self, method: str, path_fragment: str, error: Exception) -> None:
        """Raise ``error`` for requests whose path contains ``path_fragment``."""
        self.failures[(method, path_fragment)] = error

    def calls_to(self, fragment: str) -> List[Tuple[str, str, Optional[Dict[str, Any]]]]:
        return [call for call in self.calls if fragment in call[1]]

    async def request(self, method, path, data=None, params=None, timeout=None):
        self.calls.append((method, path, data))

        for (fail_method, fragment), error in self.failures.items():
            if method == fail_method and fragment in path:
                raise error

        if method == "GET" and "/git/ref/heads/" in path:
            branch = path.split("/git/ref/heads/", 1)[1]
            return {"ref": f"refs/heads/{branch}", "object": {"sha": "tip-sha"}}
        if method == "GET" and "/git/commits/" in path:
            return {"sha": "tip-sha", "tree": {"sha": "base-tree-sha"}, "message": "previous"}
        if method == "POST" and path.endswith("/git/blobs"):
            self.blob_count += 1
            return {"sha": f"blob-{self.blob_count}"}
        if method == "POST" and path.endswith("/git/trees"):
            return {"sha": "new-tree-sha"}
        if method == "POST" and path.endswith("/git/commits"):
            return {"sha": "new-commit-sha"}
        if method == "PATCH" and "/git/refs/heads/" in path:
            branch = path.split("/git/refs/heads/", 1)[1]
            return {"ref": f"refs/heads/{branch}", "object": {"sha": data["sha"]}}

        raise AssertionError(f"Unexpected GitHub call: {method} {path}")


@pytest.fixture
def fake_github():
    """Route every GitHubAPIClient request to a FakeGitHub."""
    fake = FakeGitHub()
    with patch.object(GitHubAPIClient, "request", new=fake.request):
        yield fake
