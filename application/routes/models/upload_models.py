"""
Request models for the upload route.

Normalizes the multipart form fields sent by the upload page.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from application.services.upload.models import UploadTarget
from common.config.config import DEFAULT_BRANCH, DEFAULT_COMMIT_MESSAGE


def _clean(value: Any) -> str:
    return str(value if value is not None else "").strip()


class UploadForm(BaseModel):
    """
    Form fields of an upload request.

    The token is kept as a SecretStr so it never shows up in reprs or logs.
    """

    model_config = ConfigDict(populate_by_name=True)

    token: SecretStr = Field(..., description="GitHub access token")
    owner: str = Field(..., description="Repository owner", examples=["octocat"])
    repo: str = Field(..., description="Repository name", examples=["hello-world"])
    branch: str = Field(default=DEFAULT_BRANCH, description="Target branch")
    base_path: str = Field(
        default="",
        alias="basePath",
        description="Directory inside the repository the files are placed in",
    )
    message: str = Field(default=DEFAULT_COMMIT_MESSAGE, description="Commit message")

    @field_validator("token", "owner", "repo", mode="before")
    @classmethod
    def required_not_blank(cls, v: Any) -> str:
        """Validate required fields are not empty or whitespace."""
        v = _clean(v)
        if not v:
            raise ValueError("field cannot be empty or whitespace")
        return v

    @field_validator("branch", mode="before")
    @classmethod
    def default_branch(cls, v: Any) -> str:
        return _clean(v) or DEFAULT_BRANCH

    @field_validator("message", mode="before")
    @classmethod
    def default_message(cls, v: Any) -> str:
        return _clean(v) or DEFAULT_COMMIT_MESSAGE

    @field_validator("base_path", mode="before")
    @classmethod
    def normalize_base_path(cls, v: Any) -> str:
        """Strip leading slashes and end non-empty paths with exactly one '/'."""
        v = _clean(v).strip("/")
        return f"{v}/" if v else ""

    def to_target(self) -> UploadTarget:
        return UploadTarget(
            owner=self.owner,
            repository_name=self.repo,
            branch=self.branch,
            base_path=self.base_path,
            message=self.message,
        )
