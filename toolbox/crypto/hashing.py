"""Digest fan-out over a fixed set of hash algorithms."""

import hashlib
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from Crypto.Hash import MD2, MD4, keccak

HASH_ALGORITHMS = (
    "md2",
    "md4",
    "md5",
    "sha1",
    "sha224",
    "sha256",
    "sha384",
    "sha512",
    "keccak256",
)

# digests hashlib does not guarantee come from pycryptodome
_LEGACY_DIGESTS: dict[str, Callable[[bytes], str]] = {
    "md2": lambda data: MD2.new(data).hexdigest(),
    "md4": lambda data: MD4.new(data).hexdigest(),
    "keccak256": lambda data: keccak.new(digest_bits=256, data=data).hexdigest(),
}


def _digest(algorithm: str, data: bytes, lowercase: bool) -> str:
    legacy = _LEGACY_DIGESTS.get(algorithm)
    if legacy is not None:
        hexdigest = legacy(data)
    else:
        hexdigest = hashlib.new(algorithm, data).hexdigest()
    return hexdigest if lowercase else hexdigest.upper()


def hash_bytes(data: bytes, lowercase: bool = True) -> dict[str, str]:
    """Hash ``data`` with every algorithm in parallel."""
    with ThreadPoolExecutor(max_workers=len(HASH_ALGORITHMS)) as pool:
        futures = {
            name: pool.submit(_digest, name, data, lowercase)
            for name in HASH_ALGORITHMS
        }
        return {name: future.result() for name, future in futures.items()}


def hash_string(text: str, lowercase: bool = True) -> dict[str, str]:
    """Hash the UTF-8 bytes of ``text``."""
    return hash_bytes(text.encode(), lowercase=lowercase)
