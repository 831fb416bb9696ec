"""
GitHub Service Package

Thin service layer over the GitHub REST API.

Main Components:
- GitHubAPIClient: authenticated REST client
- GitDataOperations: refs, commits, blobs and trees
"""

from application.services.github.api.client import GitHubAPIClient
from application.services.github.api.git_data import GitDataOperations

__all__ = ["GitHubAPIClient", "GitDataOperations"]
