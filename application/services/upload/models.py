"""
Data carried through an upload.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class IncomingFile:
    """A file received from the client."""

    filename: Optional[str]
    content: bytes


@dataclass
class UploadTarget:
    """Where and how the files are committed."""

    owner: str
    repository_name: str
    branch: str
    base_path: str
    message: str

    def path_for(self, name: str) -> str:
        return f"{self.base_path}{name}"


@dataclass
class UploadResult:
    commit_sha: str
    uploaded: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "commit": self.commit_sha,
            "uploaded": len(self.uploaded),
            "skipped": list(self.skipped),
        }
