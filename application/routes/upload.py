"""
Upload Routes

Handles multipart uploads that are committed to a GitHub repository:
- Enforces per-file size and file count limits
- Validates token/owner/repo form fields
- Publishes the accepted files as a single commit

The GitHub token travels with each request and is never stored.
"""

import asyncio
import logging
from datetime import timedelta
from typing import List

from pydantic import ValidationError
from quart import Blueprint, request
from quart_rate_limiter import rate_limit
from werkzeug.exceptions import BadRequest

from application.routes.common.rate_limiting import default_rate_limit_key
from application.routes.common.request_id import get_request_id
from application.routes.common.response import APIResponse
from application.routes.common.validation import (
    check_multipart_complete,
    format_validation_errors,
    load_form,
)
from application.routes.models.upload_models import UploadForm
from application.services.github.api.client import GitHubAPIClient
from application.services.github.api.git_data import GitDataOperations
from application.services.upload.models import IncomingFile
from application.services.upload.service import UploadService
from common.config.config import MAX_UPLOAD_FILE_SIZE, MAX_UPLOAD_FILES, UPLOAD_RATE_LIMIT
from common.exception.exceptions import (
    FileCountLimitError,
    FileSizeLimitError,
    MissingFieldsError,
    MultipartError,
    NoFilesError,
)

logger = logging.getLogger(__name__)

upload_bp = Blueprint("upload", __name__)

# Multipart field holding the uploaded files
FILES_FIELD = "files"


def create_upload_service(token: str) -> UploadService:
    """Build an upload service authenticated with the client's token."""
    return UploadService(GitDataOperations(GitHubAPIClient(token=token)))


async def ensure_complete_body() -> None:
    """
    Reject multipart bodies that end before their closing boundary.

    Raises:
        MultipartError: If the boundary is missing or the body is truncated
    """
    if request.mimetype != "multipart/form-data":
        return

    boundary = request.mimetype_params.get("boundary")
    if not boundary:
        raise MultipartError("Multipart boundary is missing.")

    body = await request.get_data()
    try:
        check_multipart_complete(body, boundary.encode("latin-1"))
    except ValueError as e:
        raise MultipartError("Multipart body is incomplete or malformed.") from e


async def read_uploaded_files() -> List[IncomingFile]:
    """
    Read the submitted files, enforcing count and per-file size limits.

    File inputs submitted without a selection (empty name, empty body) are ignored.

    Raises:
        MultipartError: If the multipart body is truncated or cannot be parsed
        FileCountLimitError: If more than MAX_UPLOAD_FILES files were sent
        FileSizeLimitError: If any file exceeds MAX_UPLOAD_FILE_SIZE
    """
    await ensure_complete_body()

    try:
        submitted = (await request.files).getlist(FILES_FIELD)
    except BadRequest as e:
        raise MultipartError(e.description or "Malformed multipart body") from e

    if len(submitted) > MAX_UPLOAD_FILES:
        raise FileCountLimitError(f"Too many files (max {MAX_UPLOAD_FILES}).")

    files: List[IncomingFile] = []
    for storage in submitted:
        content = storage.read(MAX_UPLOAD_FILE_SIZE + 1)
        if len(content) > MAX_UPLOAD_FILE_SIZE:
            raise FileSizeLimitError(
                f"A file is larger than {MAX_UPLOAD_FILE_SIZE // (1024 * 1024)}MB, rejected."
            )
        if not storage.filename and not content:
            continue
        files.append(IncomingFile(filename=storage.filename, content=content))

    return files


async def read_upload_form() -> UploadForm:
    """
    Load and normalize the upload form fields.

    Raises:
        MultipartError: If the multipart body cannot be parsed
        MissingFieldsError: If token, owner or repo is missing or blank
    """
    try:
        form = await request.form
    except BadRequest as e:
        raise MultipartError(e.description or "Malformed multipart body") from e

    try:
        return load_form(UploadForm, form)
    except ValidationError as e:
        raise MissingFieldsError(
            "Token, owner and repo are required.",
            extra={"details": {"errors": format_validation_errors(e)}},
        ) from e


@upload_bp.route("/upload", methods=["POST"])
@rate_limit(UPLOAD_RATE_LIMIT, timedelta(minutes=1), key_function=default_rate_limit_key)
async def upload_files():
    """
    Commit the uploaded files to a GitHub branch.

    Form fields:
        token, owner, repo (required), branch (default main),
        basePath, message, files (repeated)

    Returns:
        200: {"ok": true, "rid", "commit", "uploaded", "skipped"}
        400: MULTIPART_ERROR, MISSING_FIELDS, NO_FILES, ALL_SKIPPED
        413: LIMIT_FILE_COUNT, LIMIT_FILE_SIZE, PAYLOAD_TOO_LARGE
        4xx/5xx: UPLOAD_FAILED with the GitHub status and message
    """
    rid = get_request_id()
    try:
        files = await read_uploaded_files()
        form = await read_upload_form()

        if not files:
            raise NoFilesError("Pick at least one file.")

        target = form.to_target()
        logger.info(
            f"[{rid}] files={len(files)} repo={target.owner}/{target.repository_name} "
            f"branch={target.branch} basePath={target.base_path or '-'}"
        )

        service = create_upload_service(form.token.get_secret_value())
        result = await service.publish(target, files, request_id=rid)

        logger.info(
            f"[{rid}] ✅ done commit={result.commit_sha} "
            f"uploaded={len(result.uploaded)} skipped={len(result.skipped)}"
        )
        return APIResponse.success(result.to_dict())

    except asyncio.CancelledError:
        logger.warning(f"[{rid}] ⚠️ request aborted by client before response was sent")
        raise
