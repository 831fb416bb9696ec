"""
GitHub Git Data operations (refs, commits, blobs, trees).
"""

import base64
import logging
from typing import List, Optional
from urllib.parse import quote

from application.services.github.api.client import GitHubAPIClient
from application.services.github.models.types import CommitInfo, RefInfo, TreeEntry

logger = logging.getLogger(__name__)


def repo_path(owner: str, repository_name: str) -> str:
    """Build the ``repos/<owner>/<repo>`` prefix with each segment percent-encoded."""
    return f"repos/{quote(owner, safe='')}/{quote(repository_name, safe='')}"


def branch_path(branch: str) -> str:
    """Percent-encode a branch name, keeping ``/`` so ``feature/x`` stays nested."""
    return quote(branch, safe="/")


class GitDataOperations:
    """Handles low-level Git object and reference operations."""

    def __init__(self, client: GitHubAPIClient):
        """Initialize Git Data operations.

        Args:
            client: Authenticated GitHub API client
        """
        self.client = client

    async def get_ref(self, owner: str, repository_name: str, branch: str) -> RefInfo:
        """Get the branch reference.

        Args:
            owner: Repository owner
            repository_name: Repository name
            branch: Branch name (without the heads/ prefix)

        Returns:
            RefInfo with the commit SHA the branch points to

        Raises:
            GitHubAPIError: If the branch does not exist or the request fails
        """
        response = await self.client.get(
            f"{repo_path(owner, repository_name)}/git/ref/heads/{branch_path(branch)}"
        )
        return RefInfo(ref=response["ref"], sha=response["object"]["sha"])

    async def get_commit(self, owner: str, repository_name: str, commit_sha: str) -> CommitInfo:
        """Get a commit object.

        Returns:
            CommitInfo carrying the SHA of the commit's root tree
        """
        response = await self.client.get(
            f"{repo_path(owner, repository_name)}/git/commits/{quote(commit_sha, safe='')}"
        )
        return CommitInfo(
            sha=response["sha"],
            tree_sha=response["tree"]["sha"],
            message=response.get("message", ""),
        )

    async def create_blob(self, owner: str, repository_name: str, content: bytes) -> str:
        """Upload raw file content as a blob.

        Content is always sent base64 encoded so binary files survive intact.

        Returns:
            SHA of the created blob
        """
        response = await self.client.post(
            f"{repo_path(owner, repository_name)}/git/blobs",
            data={
                "content": base64.b64encode(content).decode("ascii"),
                "encoding": "base64",
            },
        )
        return response["sha"]

    async def create_tree(
        self,
        owner: str,
        repository_name: str,
        entries: List[TreeEntry],
        base_tree: Optional[str] = None,
    ) -> str:
        """Create a tree, optionally layered over an existing base tree.

        Returns:
            SHA of the created tree
        """
        data = {"tree": [entry.to_dict() for entry in entries]}
        if base_tree:
            data["base_tree"] = base_tree

        response = await self.client.post(
            f"{repo_path(owner, repository_name)}/git/trees", data=data
        )
        return response["sha"]

    async def create_commit(
        self,
        owner: str,
        repository_name: str,
        message: str,
        tree_sha: str,
        parents: List[str],
    ) -> str:
        """Create a commit object.

        Returns:
            SHA of the created commit
        """
        response = await self.client.post(
            f"{repo_path(owner, repository_name)}/git/commits",
            data={"message": message, "tree": tree_sha, "parents": list(parents)},
        )
        return response["sha"]

    async def update_ref(
        self,
        owner: str,
        repository_name: str,
        branch: str,
        sha: str,
        force: bool = False,
    ) -> RefInfo:
        """Point a branch at a new commit.

        Without ``force`` GitHub rejects updates that are not fast-forwards,
        so a concurrent push to the branch surfaces as a 422 error.
        """
        response = await self.client.patch(
            f"{repo_path(owner, repository_name)}/git/refs/heads/{branch_path(branch)}",
            data={"sha": sha, "force": force},
        )
        logger.info(f"Updated {owner}/{repository_name} heads/{branch} -> {sha}")
        return RefInfo(ref=response.get("ref", f"refs/heads/{branch}"), sha=sha)
