"""Hash fan-out endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from starlette.concurrency import run_in_threadpool

from toolbox.api.deps import Settings, require_api_token
from toolbox.api.schemas import ErrorResponse, HashStringRequest
from toolbox.crypto.hashing import hash_bytes, hash_string

router = APIRouter(
    prefix="/hash",
    tags=["hash"],
    dependencies=[Depends(require_api_token)],
    responses={400: {"model": ErrorResponse}},
)


@router.post("/string")
def hash_text(body: HashStringRequest) -> dict[str, str]:
    """POST /hash/string -- digest the UTF-8 bytes of a string."""
    return hash_string(body.input, lowercase=body.lowercase)


@router.post("/file")
async def hash_upload(
    file: Annotated[UploadFile, File()],
    settings: Settings,
    lowercase: Annotated[bool, Form()] = True,
) -> dict[str, str]:
    """POST /hash/file -- digest an uploaded file."""
    limit = settings.hash_max_upload_bytes
    data = await file.read(limit + 1)
    if len(data) > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds {limit} bytes",
        )
    return await run_in_threadpool(hash_bytes, data, lowercase)
