"""UUID tool endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from toolbox.api.deps import Settings, require_api_token
from toolbox.api.schemas import (
    ErrorResponse,
    ParsedUuidResponse,
    UuidGenerateRequest,
    UuidListResponse,
    UuidParseRequest,
)
from toolbox.tools.uuid_tools import generate_uuids, parse_uuid

router = APIRouter(
    prefix="/uuid",
    tags=["uuid"],
    dependencies=[Depends(require_api_token)],
    responses={400: {"model": ErrorResponse}},
)


@router.post("/parse")
def parse(body: UuidParseRequest) -> ParsedUuidResponse:
    """POST /uuid/parse -- describe a UUID."""
    return ParsedUuidResponse.model_validate(parse_uuid(body.uuid).model_dump())


@router.post("/generate")
def generate(body: UuidGenerateRequest, settings: Settings) -> UuidListResponse:
    """POST /uuid/generate -- generate a batch of UUIDs."""
    if body.count > settings.uuid_max_count:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"At most {settings.uuid_max_count} UUIDs per request",
        )
    uuids = generate_uuids(body.version, body.count, body.format, body.name)
    return UuidListResponse(uuids=uuids)
