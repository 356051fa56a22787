"""URL tool endpoints."""

from fastapi import APIRouter, Depends

from toolbox.api.deps import require_api_token
from toolbox.api.schemas import (
    ErrorResponse,
    TextResponse,
    UrlParseRequest,
    UrlResponse,
    UrlTextRequest,
)
from toolbox.tools import url_tools
from toolbox.tools.types import ParsedUrl, UrlParts

router = APIRouter(
    prefix="/url",
    tags=["url"],
    dependencies=[Depends(require_api_token)],
    responses={400: {"model": ErrorResponse}},
)


@router.post("/encode")
def encode_text(body: UrlTextRequest) -> TextResponse:
    """POST /url/encode -- percent-encode a string."""
    return TextResponse(result=url_tools.encode_component(body.input))


@router.post("/decode")
def decode_text(body: UrlTextRequest) -> TextResponse:
    """POST /url/decode -- percent-decode a string."""
    return TextResponse(result=url_tools.decode_component(body.input))


@router.post("/parse")
def parse(body: UrlParseRequest) -> ParsedUrl:
    """POST /url/parse -- split a URL into parts and query params."""
    return url_tools.parse_url(body.url)


@router.post("/build")
def build(parts: UrlParts) -> UrlResponse:
    """POST /url/build -- assemble a URL from parts."""
    return UrlResponse(url=url_tools.build_url(parts))
