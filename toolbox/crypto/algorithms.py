"""Supported JWT signing algorithms and their key families."""

from enum import StrEnum

from toolbox.core.errors import UnsupportedAlgorithm


class Algorithm(StrEnum):
    """JWS algorithm names accepted by the toolbox."""

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"


class KeyFamily(StrEnum):
    """Kind of key material an algorithm signs with."""

    SYMMETRIC = "symmetric"
    ASYMMETRIC = "asymmetric"


_FAMILIES: dict[Algorithm, KeyFamily] = {
    Algorithm.HS256: KeyFamily.SYMMETRIC,
    Algorithm.HS384: KeyFamily.SYMMETRIC,
    Algorithm.HS512: KeyFamily.SYMMETRIC,
    Algorithm.RS256: KeyFamily.ASYMMETRIC,
    Algorithm.RS384: KeyFamily.ASYMMETRIC,
    Algorithm.RS512: KeyFamily.ASYMMETRIC,
}


def resolve(name: str) -> Algorithm:
    """Resolve an algorithm name; matching is exact and case-sensitive."""
    try:
        return Algorithm(name)
    except ValueError:
        raise UnsupportedAlgorithm(name) from None


def family_of(algorithm: Algorithm) -> KeyFamily:
    """Return the key family for a resolved algorithm."""
    return _FAMILIES[algorithm]
