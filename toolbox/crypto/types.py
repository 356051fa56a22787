"""Type definitions for JWT decode, verify and key generation results."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

JsonObject = dict[str, Any]


class KeyPair(BaseModel):
    """A freshly generated RSA keypair, both halves PKCS#1 PEM."""

    private_key: str
    public_key: str


class TokenParts(BaseModel):
    """Unverified view of a token's three segments."""

    header: JsonObject
    payload: JsonObject
    signature: str
    is_expired: bool = False
    expires_at: int | None = None
    issued_at: int | None = None


class ValidToken(BaseModel):
    """Signature checks out and the token is not expired."""

    status: Literal["valid"] = "valid"
    header: JsonObject
    claims: JsonObject

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def error(self) -> str | None:
        return None

    @property
    def decoded_header(self) -> JsonObject | None:
        return self.header

    @property
    def decoded_payload(self) -> JsonObject | None:
        return self.claims


class ExpiredToken(BaseModel):
    """Signature checks out but ``exp`` has passed; claims stay visible."""

    status: Literal["expired"] = "expired"
    header: JsonObject
    claims: JsonObject
    message: str

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def error(self) -> str | None:
        return self.message

    @property
    def decoded_header(self) -> JsonObject | None:
        return self.header

    @property
    def decoded_payload(self) -> JsonObject | None:
        return self.claims


class InvalidToken(BaseModel):
    """Verification could not succeed; nothing decoded is exposed."""

    status: Literal["invalid"] = "invalid"
    message: str

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def error(self) -> str | None:
        return self.message

    @property
    def decoded_header(self) -> JsonObject | None:
        return None

    @property
    def decoded_payload(self) -> JsonObject | None:
        return None


VerifyResult = Annotated[
    ValidToken | ExpiredToken | InvalidToken, Field(discriminator="status")
]
