"""
Upload Service.

Publishes a batch of files to a GitHub branch as a single commit using the
Git Data API:

1. read the branch ref to find the tip commit
2. read the tip commit to find its tree
3. upload every accepted file as a blob
4. create a tree on top of the tip tree
5. create a commit with the tip as its only parent
6. move the branch ref to the new commit
"""

import logging
from typing import Iterable, List, Tuple

from application.services.github.api.git_data import GitDataOperations
from application.services.github.models.types import TreeEntry
from application.services.upload.filters import is_sensitive_filename, normalize_filename
from application.services.upload.models import IncomingFile, UploadResult, UploadTarget
from common.exception.exceptions import AllFilesSkippedError

logger = logging.getLogger(__name__)


def partition_files(
    files: Iterable[IncomingFile],
) -> Tuple[List[Tuple[str, IncomingFile]], List[str]]:
    """
    Split files into accepted (name, file) pairs and skipped names.

    Both lists keep submission order.
    """
    accepted: List[Tuple[str, IncomingFile]] = []
    skipped: List[str] = []

    for incoming in files:
        name = normalize_filename(incoming.filename)
        if is_sensitive_filename(name):
            skipped.append(name)
            continue
        accepted.append((name, incoming))

    return accepted, skipped


class UploadService:
    """Commits uploaded files to a repository branch."""

    def __init__(self, git_data: GitDataOperations):
        self.git_data = git_data

    async def publish(
        self,
        target: UploadTarget,
        files: List[IncomingFile],
        request_id: str = "-",
    ) -> UploadResult:
        """
        Publish files as one new commit on the target branch.

        Args:
            target: Repository, branch, base path and commit message
            files: Files in submission order
            request_id: Id used to prefix log lines

        Returns:
            UploadResult with the new commit SHA, uploaded paths and skipped names

        Raises:
            AllFilesSkippedError: If the filename filter drops every file
            GitHubAPIError: If any GitHub call fails; the branch is only moved
                by the final call, so earlier failures leave it untouched
        """
        accepted, skipped = partition_files(files)
        if not accepted:
            logger.warning(f"[{request_id}] all files skipped by safety filter")
            raise AllFilesSkippedError(skipped)

        owner, repo = target.owner, target.repository_name

        ref = await self.git_data.get_ref(owner, repo, target.branch)
        latest_commit = await self.git_data.get_commit(owner, repo, ref.sha)
        logger.info(
            f"[{request_id}] {owner}/{repo}@{target.branch} tip={ref.sha} "
            f"base_tree={latest_commit.tree_sha}"
        )

        entries: List[TreeEntry] = []
        for name, incoming in accepted:
            blob_sha = await self.git_data.create_blob(owner, repo, incoming.content)
            entries.append(TreeEntry(path=target.path_for(name), sha=blob_sha))

        tree_sha = await self.git_data.create_tree(
            owner, repo, entries, base_tree=latest_commit.tree_sha
        )
        commit_sha = await self.git_data.create_commit(
            owner, repo, target.message, tree_sha, parents=[ref.sha]
        )
        await self.git_data.update_ref(owner, repo, target.branch, commit_sha)

        return UploadResult(
            commit_sha=commit_sha,
            uploaded=[entry.path for entry in entries],
            skipped=skipped,
        )
