"""Time-based claim evaluation, independent of signature checks."""

import time
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any


def now_seconds() -> int:
    """Current wall-clock time in whole seconds since the epoch."""
    return int(time.time())


def _timestamp(claims: Mapping[str, Any], name: str) -> int | None:
    value = claims.get(name)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    try:
        return int(value)
    except (OverflowError, ValueError):
        # inf / nan
        return None


def expires_at(claims: Mapping[str, Any]) -> int | None:
    """Return the ``exp`` claim in seconds, if present and numeric."""
    return _timestamp(claims, "exp")


def issued_at(claims: Mapping[str, Any]) -> int | None:
    """Return the ``iat`` claim in seconds, if present and numeric."""
    return _timestamp(claims, "iat")


def is_expired(claims: Mapping[str, Any], now: int) -> bool:
    """True iff ``exp`` is present and strictly before ``now``."""
    exp = expires_at(claims)
    return exp is not None and now > exp


def describe_expiry(exp: int) -> str:
    """Render an expiry instant as RFC 3339 UTC, or the raw number."""
    try:
        return datetime.fromtimestamp(exp, UTC).isoformat()
    except (OverflowError, OSError, ValueError):
        return str(exp)
