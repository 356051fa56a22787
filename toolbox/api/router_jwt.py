"""JWT toolkit endpoints.

Handlers are plain functions so that signing and RSA key generation run in
the worker threadpool instead of on the event loop.
"""

from fastapi import APIRouter, Depends

from toolbox.api.deps import require_api_token
from toolbox.api.schemas import (
    DecodeRequest,
    DecodeResponse,
    EncodeRequest,
    ErrorResponse,
    KeyPairRequest,
    KeyPairResponse,
    SecretRequest,
    SecretResponse,
    TokenResponse,
    VerifyRequest,
    VerifyResponse,
)
from toolbox.crypto import codec, verifier
from toolbox.crypto.credentials import generate_rsa_keypair, generate_secret

router = APIRouter(
    prefix="/jwt",
    tags=["jwt"],
    dependencies=[Depends(require_api_token)],
    responses={400: {"model": ErrorResponse}},
)


@router.post("/decode")
def decode_token(body: DecodeRequest) -> DecodeResponse:
    """POST /jwt/decode -- split and decode a token without verifying it."""
    parts = codec.decode(body.token)
    return DecodeResponse.model_validate(parts.model_dump())


@router.post("/encode")
def encode_token(body: EncodeRequest) -> TokenResponse:
    """POST /jwt/encode -- sign a payload."""
    return TokenResponse(token=codec.encode(body.payload, body.secret, body.algorithm))


@router.post("/verify")
def verify_token(body: VerifyRequest) -> VerifyResponse:
    """POST /jwt/verify -- always 200; the outcome is in the body."""
    result = verifier.verify(body.token, body.secret, body.algorithm)
    return VerifyResponse(
        is_valid=result.is_valid,
        error=result.error,
        decoded_header=result.decoded_header,
        decoded_payload=result.decoded_payload,
    )


@router.post("/keypair")
def create_keypair(body: KeyPairRequest) -> KeyPairResponse:
    """POST /jwt/keypair -- generate an RSA keypair."""
    pair = generate_rsa_keypair(body.key_size)
    return KeyPairResponse(private_key=pair.private_key, public_key=pair.public_key)


@router.post("/secret")
def create_secret(body: SecretRequest) -> SecretResponse:
    """POST /jwt/secret -- generate an HMAC secret."""
    return SecretResponse(secret=generate_secret(body.length))
