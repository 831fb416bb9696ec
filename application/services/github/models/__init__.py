"""
GitHub Models Module

Shared types, enums, and dataclasses for Git Data operations.
"""

from application.services.github.models.types import (
    CommitInfo,
    RefInfo,
    TreeEntry,
    TreeEntryMode,
    TreeEntryType,
)

__all__ = [
    "CommitInfo",
    "RefInfo",
    "TreeEntry",
    "TreeEntryMode",
    "TreeEntryType",
]
