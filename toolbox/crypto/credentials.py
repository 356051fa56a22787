"""RSA keypair and shared-secret generation."""

import logging
import secrets
import string

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from toolbox.core.errors import KeySizeError, SecretLengthError
from toolbox.crypto.types import KeyPair

logger = logging.getLogger(__name__)

RSA_KEY_SIZES = (2048, 3072, 4096)
RSA_PUBLIC_EXPONENT = 65537
MIN_SECRET_LENGTH = 32
SECRET_ALPHABET = string.ascii_letters + string.digits


def generate_rsa_keypair(bits: int) -> KeyPair:
    """Generate a new RSA keypair, PKCS#1 PEM encoded."""
    if bits not in RSA_KEY_SIZES:
        raise KeySizeError("Key size must be 2048, 3072, or 4096 bits")
    logger.debug("Generating %d-bit RSA keypair", bits)
    private_key = rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=bits,
    )
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.PKCS1,
        )
        .decode()
    )
    return KeyPair(private_key=private_pem, public_key=public_pem)


def generate_secret(length: int) -> str:
    """Generate a random alphanumeric HMAC secret of ``length`` characters."""
    if length < MIN_SECRET_LENGTH:
        raise SecretLengthError(
            f"Secret length must be at least {MIN_SECRET_LENGTH} characters"
        )
    return "".join(secrets.choice(SECRET_ALPHABET) for _ in range(length))
