"""
GitHub API Module

Handles the GitHub REST API interactions needed to publish a commit:
- Authenticated request client
- Git Data operations (refs, commits, blobs, trees)
"""

from application.services.github.api.client import GitHubAPIClient
from application.services.github.api.git_data import GitDataOperations

__all__ = [
    "GitHubAPIClient",
    "GitDataOperations",
]
