"""Key material loading for JWT signing and verification."""

from cryptography.exceptions import UnsupportedAlgorithm as UnsupportedKeyType
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from toolbox.core.errors import KeyMaterialError
from toolbox.crypto.algorithms import Algorithm, KeyFamily, family_of

PEM_MARKER = "-----BEGIN"

SigningKey = bytes | RSAPrivateKey
VerificationKey = bytes | RSAPublicKey

_PEM_LOAD_ERRORS = (ValueError, TypeError, UnsupportedKeyType)


def _shared_secret(secret_text: str) -> bytes:
    """Wrap the raw bytes of a shared secret, refusing PEM key material."""
    if secret_text.lstrip().startswith(PEM_MARKER):
        raise KeyMaterialError(
            "PEM key material cannot be used as an HMAC shared secret"
        )
    return secret_text.encode()


def load_rsa_private_key(pem_text: str) -> RSAPrivateKey:
    """Parse an unencrypted PEM RSA private key (PKCS#1 or PKCS#8)."""
    try:
        loaded = serialization.load_pem_private_key(pem_text.encode(), password=None)
    except _PEM_LOAD_ERRORS as exc:
        raise KeyMaterialError(f"Failed to parse RSA private key: {exc}") from exc
    if not isinstance(loaded, RSAPrivateKey):
        raise KeyMaterialError("Failed to parse RSA private key: not an RSA key")
    return loaded


def load_rsa_public_key(pem_text: str) -> RSAPublicKey:
    """Parse a PEM RSA public key (PKCS#1 or SubjectPublicKeyInfo)."""
    try:
        loaded = serialization.load_pem_public_key(pem_text.encode())
    except _PEM_LOAD_ERRORS as exc:
        raise KeyMaterialError(f"Failed to parse RSA public key: {exc}") from exc
    if not isinstance(loaded, RSAPublicKey):
        raise KeyMaterialError("Failed to parse RSA public key: not an RSA key")
    return loaded


def load_signing_key(algorithm: Algorithm, secret_text: str) -> SigningKey:
    """Materialize the key used to sign with ``algorithm``."""
    if family_of(algorithm) is KeyFamily.SYMMETRIC:
        return _shared_secret(secret_text)
    return load_rsa_private_key(secret_text)


def load_verification_key(algorithm: Algorithm, secret_text: str) -> VerificationKey:
    """Materialize the key used to verify ``algorithm`` signatures.

    RSA algorithms accept either a public key or a private key; the public
    parse is attempted first, then the private parse with the public half
    derived from it. When both fail, the error lists both attempts.
    """
    if family_of(algorithm) is KeyFamily.SYMMETRIC:
        return _shared_secret(secret_text)

    try:
        return load_rsa_public_key(secret_text)
    except KeyMaterialError as public_exc:
        public_failure = public_exc.message

    try:
        private_key = load_rsa_private_key(secret_text)
    except KeyMaterialError as private_exc:
        attempts = (public_failure, private_exc.message)
        raise KeyMaterialError(
            "Failed to parse RSA key as public key or private key: "
            + "; ".join(attempts),
            attempts=attempts,
        ) from private_exc
    return private_key.public_key()
