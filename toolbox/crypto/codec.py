"""JWT compact serialization: splitting, segment decoding and signing."""

import base64
import json
import logging
import re
from collections.abc import Mapping
from typing import Any

import jwt

from toolbox.core.errors import FormatError, SigningError
from toolbox.crypto import claims as claims_mod
from toolbox.crypto.algorithms import resolve
from toolbox.crypto.keys import load_signing_key
from toolbox.crypto.types import JsonObject, TokenParts

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
TOKEN_SEGMENTS = 3

_BASE64URL = re.compile(r"[A-Za-z0-9_-]*")


def strip_bearer(token_text: str) -> str:
    """Trim whitespace and drop a leading ``Bearer `` prefix."""
    token = token_text.strip()
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX) :]
    return token


def split_token(token_text: str) -> tuple[str, str, str]:
    """Split a token into its header, payload and signature segments."""
    parts = strip_bearer(token_text).split(".")
    if len(parts) != TOKEN_SEGMENTS:
        raise FormatError(
            "Invalid JWT format. Expected 3 parts separated by dots, "
            f"found {len(parts)}."
        )
    header, payload, signature = parts
    return header, payload, signature


def base64url_decode(segment: str) -> bytes:
    """Decode base64url without padding, rejecting stray characters."""
    if not _BASE64URL.fullmatch(segment) or len(segment) % 4 == 1:
        raise ValueError("not a base64url string")
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def decode_segment(segment: str, label: str) -> JsonObject:
    """Decode one segment through base64url, UTF-8 and JSON.

    Each stage fails with its own message so callers can tell what kind of
    corruption they are looking at.
    """
    try:
        raw = base64url_decode(segment)
    except ValueError as exc:
        raise FormatError(f"Failed to decode {label}: invalid base64") from exc
    return parse_json_object(raw, label)


def parse_json_object(raw: bytes, label: str) -> JsonObject:
    """Parse UTF-8 JSON bytes that must hold an object."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FormatError(f"Failed to decode {label}: invalid UTF-8 ({exc})") from exc
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FormatError(f"Failed to decode {label}: invalid JSON ({exc})") from exc
    if not isinstance(value, dict):
        raise FormatError(f"Failed to decode {label}: not a JSON object")
    return value


def decode_header_segment(token_text: str) -> JsonObject:
    """Decode only the header, e.g. to show the declared ``alg`` and ``kid``.

    The result is informational and is never used to choose how a token is
    verified.
    """
    header, _payload, _signature = split_token(token_text)
    return decode_segment(header, "header")


def decode(token_text: str, now: int | None = None) -> TokenParts:
    """Decode a token without verifying its signature."""
    header_seg, payload_seg, signature = split_token(token_text)
    header = decode_segment(header_seg, "header")
    payload = decode_segment(payload_seg, "payload")
    if now is None:
        now = claims_mod.now_seconds()
    return TokenParts(
        header=header,
        payload=payload,
        signature=signature,
        is_expired=claims_mod.is_expired(payload, now),
        expires_at=claims_mod.expires_at(payload),
        issued_at=claims_mod.issued_at(payload),
    )


def encode(payload: Mapping[str, Any], secret_text: str, algorithm_name: str) -> str:
    """Sign ``payload`` into a compact JWT with header ``{alg, typ: JWT}``."""
    algorithm = resolve(algorithm_name)
    key = load_signing_key(algorithm, secret_text)
    try:
        token = jwt.encode(dict(payload), key, algorithm=algorithm.value)
    except (jwt.PyJWTError, TypeError, ValueError) as exc:
        raise SigningError(f"Failed to encode JWT: {exc}") from exc
    logger.debug("Encoded %s token", algorithm.value)
    return token
