"""File relay endpoints.

Accepts base64 file content from the client, validates it, and uploads
it to the completion provider's file store.
"""

import base64
import binascii
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from chat_relay.api.deps import file_service, get_current_user
from chat_relay.llm.files import FileRelayError, FileRelayService
from chat_relay.models.schemas import AuthUser, ErrorResponse, UploadRequest, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["files"])


def _decode_content(content: str) -> bytes:
    """Decode base64 file content.

    Raises:
        HTTPException: 400 if the content is not valid base64.
    """
    try:
        return base64.b64decode(content, validate=True)
    except (binascii.Error, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Content must be base64 encoded",
        ) from e


def _validate_size(data: bytes, limit: int) -> bytes:
    """Reject decoded payloads over the configured limit.

    Raises:
        HTTPException: 413 if the file is too large.
    """
    if len(data) > limit:
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail="File exceeds maximum upload size",
        )
    return data


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def upload_file(
    request: UploadRequest,
    user: AuthUser = Depends(get_current_user),
    service: FileRelayService = Depends(file_service),
) -> UploadResponse:
    """Upload a base64-encoded file to the completion provider.

    Raises:
        400: Missing fields or content that is not base64.
        401: Missing or invalid bearer token.
        413: File exceeds the upload limit.
        500: Provider upload failed.
    """
    if not request.filename or not request.content or not request.project_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename, content, and projectId required",
        )

    data = _validate_size(_decode_content(request.content), service.max_upload_bytes)

    try:
        uploaded = await service.upload(request.filename, data)
    except FileRelayError as e:
        logger.error(f"Upload error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Upload failed",
        ) from e

    logger.info(
        f"User {user.id} uploaded {request.filename} to project {request.project_id}"
    )

    return UploadResponse(success=True, file_id=uploaded.id, filename=request.filename)


@router.get(
    "/file/{file_id}",
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_file(
    file_id: str,
    user: AuthUser = Depends(get_current_user),
    service: FileRelayService = Depends(file_service),
) -> dict[str, Any]:
    """Return provider metadata for an uploaded file."""
    try:
        return await service.retrieve(file_id)
    except FileRelayError as e:
        logger.error(f"File retrieval error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not retrieve file",
        ) from e
