"""Token verification with distinguishable valid / expired / invalid outcomes.

Verification runs in a fixed order:

1. Resolve the caller's algorithm name.
2. Load the verification key for that algorithm's family.
3. Check the signature with the algorithm pinned to the resolved one. The
   ``alg`` declared in the token header must match it; it is never used to
   pick the algorithm. No claim is validated at this stage.
4. Evaluate ``exp`` against a single clock sample.

Outcomes are returned as values. Only the signature check decides between
"forged or corrupt" (InvalidToken) and "sound but stale" (ExpiredToken).
"""

import logging

from jwt import PyJWTError, api_jws

from toolbox.core.errors import ToolError
from toolbox.crypto import claims as claims_mod
from toolbox.crypto.algorithms import resolve
from toolbox.crypto.codec import parse_json_object, strip_bearer
from toolbox.crypto.keys import load_verification_key
from toolbox.crypto.types import ExpiredToken, InvalidToken, ValidToken, VerifyResult

logger = logging.getLogger(__name__)


def verify(
    token_text: str,
    secret_text: str,
    algorithm_name: str,
    now: int | None = None,
) -> VerifyResult:
    """Verify a token against a secret or RSA key and report the outcome."""
    if now is None:
        now = claims_mod.now_seconds()
    token = strip_bearer(token_text)

    try:
        algorithm = resolve(algorithm_name)
        key = load_verification_key(algorithm, secret_text)
    except ToolError as exc:
        logger.debug("Verification rejected before signature check: %s", exc)
        return InvalidToken(message=exc.message)

    try:
        decoded = api_jws.decode_complete(
            token, key, algorithms=[algorithm.value]
        )
        payload = parse_json_object(decoded["payload"], "payload")
    except (PyJWTError, ToolError) as exc:
        logger.debug("%s signature check failed: %s", algorithm.value, exc)
        return InvalidToken(message=f"Verification failed: {exc}")

    header = decoded["header"]
    if claims_mod.is_expired(payload, now):
        exp = claims_mod.expires_at(payload)
        logger.debug("%s token verified but expired", algorithm.value)
        return ExpiredToken(
            header=header,
            claims=payload,
            message=f"Token expired at {claims_mod.describe_expiry(exp)}",
        )

    logger.debug("%s token verified", algorithm.value)
    return ValidToken(header=header, claims=payload)
