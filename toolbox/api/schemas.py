"""Pydantic schemas matching the TypeScript frontend contract."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _to_camel(name: str) -> str:
    """Convert snake_case to camelCase for JSON serialization."""
    parts = name.split("_")
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


class CamelModel(BaseModel):
    """Base for request/response bodies exchanged in camelCase."""

    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


class DecodeRequest(CamelModel):
    """Request body for POST /jwt/decode."""

    token: str


class DecodeResponse(CamelModel):
    """Mirrors TypeScript JwtParts type."""

    header: dict[str, Any]
    payload: dict[str, Any]
    signature: str
    is_expired: bool
    expires_at: int | None = None
    issued_at: int | None = None


class EncodeRequest(CamelModel):
    """Request body for POST /jwt/encode."""

    payload: dict[str, Any]
    secret: str
    algorithm: str = "HS256"


class TokenResponse(CamelModel):
    """Response for POST /jwt/encode."""

    token: str


class VerifyRequest(CamelModel):
    """Request body for POST /jwt/verify."""

    token: str
    secret: str
    algorithm: str = "HS256"


class VerifyResponse(CamelModel):
    """Mirrors TypeScript VerifyResult type."""

    is_valid: bool
    error: str | None = None
    decoded_header: dict[str, Any] | None = None
    decoded_payload: dict[str, Any] | None = None


class KeyPairRequest(CamelModel):
    """Request body for POST /jwt/keypair."""

    key_size: int = 2048


class KeyPairResponse(CamelModel):
    """Mirrors TypeScript KeyPair type."""

    private_key: str
    public_key: str


class SecretRequest(CamelModel):
    """Request body for POST /jwt/secret."""

    length: int = 64


class SecretResponse(CamelModel):
    """Response for POST /jwt/secret."""

    secret: str


class HashStringRequest(CamelModel):
    """Request body for POST /hash/string."""

    input: str
    lowercase: bool = True


class UrlTextRequest(CamelModel):
    """Request body for POST /url/encode and /url/decode."""

    input: str


class UrlParseRequest(CamelModel):
    """Request body for POST /url/parse."""

    url: str


class TextResponse(CamelModel):
    """Single-string tool output."""

    result: str


class UrlResponse(CamelModel):
    """Response for POST /url/build."""

    url: str


class RegexTestRequest(CamelModel):
    """Request body for POST /regex/test."""

    pattern: str
    text: str
    flags: str = ""


class RegexReplaceRequest(RegexTestRequest):
    """Request body for POST /regex/replace."""

    replacement: str


class UuidParseRequest(CamelModel):
    """Request body for POST /uuid/parse."""

    uuid: str


class ParsedUuidResponse(CamelModel):
    """Mirrors TypeScript ParsedUuid type."""

    is_valid: bool
    standard_format: str
    raw_contents: str
    version: str
    variant: str
    error_message: str | None = None


class UuidGenerateRequest(CamelModel):
    """Request body for POST /uuid/generate."""

    version: str = "v4"
    count: int = Field(default=1, ge=0)
    format: str = "standard"
    name: str = "example.com"


class UuidListResponse(CamelModel):
    """Response for POST /uuid/generate."""

    uuids: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body returned for rejected input."""

    error: str
