"""
Shared types and models for GitHub Git Data operations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class TreeEntryMode(str, Enum):
    FILE = "100644"
    EXECUTABLE = "100755"
    SUBDIRECTORY = "040000"
    SUBMODULE = "160000"
    SYMLINK = "120000"


class TreeEntryType(str, Enum):
    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"


@dataclass
class RefInfo:
    ref: str
    sha: str


@dataclass
class CommitInfo:
    sha: str
    tree_sha: str
    message: str


@dataclass
class TreeEntry:
    path: str
    sha: str
    mode: TreeEntryMode = TreeEntryMode.FILE
    type: TreeEntryType = TreeEntryType.BLOB

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "mode": self.mode.value,
            "type": self.type.value,
            "sha": self.sha,
        }
