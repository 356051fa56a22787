"""UUID parsing and batch generation."""

import secrets
import uuid

import uuid_utils

from toolbox.core.errors import UuidError
from toolbox.tools.types import ParsedUuid

DEFAULT_NAME = "example.com"
UUID_VERSIONS = ("v1", "v3", "v4", "v5", "v7")
UUID_FORMATS = ("standard", "no-hyphens", "uppercase", "uppercase-no-hyphens")

_VERSION_LABELS = {
    1: "1 (MAC address)",
    3: "3 (MD5)",
    4: "4 (random)",
    5: "5 (SHA-1)",
    7: "7 (sortable random)",
}

_VARIANT_LABELS = {
    uuid.RESERVED_NCS: "NCS",
    uuid.RFC_4122: "Standard (DCE 1.1, ISO/IEC 11578:1996)",
    uuid.RESERVED_MICROSOFT: "Microsoft",
    uuid.RESERVED_FUTURE: "Future",
}

_MAX_UUID = (1 << 128) - 1


def _version_label(value: uuid.UUID) -> str:
    if value.int == 0:
        return "Nil"
    if value.int == _MAX_UUID:
        return "Max"
    number = (value.int >> 76) & 0xF
    return _VERSION_LABELS.get(number, f"Version {number}")


def parse_uuid(text: str) -> ParsedUuid:
    """Describe a UUID given in any of the usual textual forms."""
    try:
        value = uuid.UUID(text.strip())
    except ValueError as exc:
        raise UuidError(f"Invalid UUID: {exc}") from exc
    return ParsedUuid(
        standard_format=str(value),
        raw_contents=value.hex,
        version=_version_label(value),
        variant=_VARIANT_LABELS.get(value.variant, "Unknown"),
    )


def _random_node() -> int:
    # 48 random bits with the multicast bit set, so no MAC address leaks
    return secrets.randbits(48) | (1 << 40)


def new_uuid(version: str, name: str = DEFAULT_NAME) -> uuid.UUID:
    """Create one UUID of the given version (``v1`` ... ``v7``)."""
    if version == "v1":
        return uuid.uuid1(node=_random_node())
    if version == "v3":
        return uuid.uuid3(uuid.NAMESPACE_DNS, name)
    if version == "v4":
        return uuid.uuid4()
    if version == "v5":
        return uuid.uuid5(uuid.NAMESPACE_DNS, name)
    if version == "v7":
        return uuid.UUID(str(uuid_utils.uuid7()))
    raise UuidError(f"Unsupported UUID version: {version}")


def format_uuid(value: uuid.UUID, fmt: str) -> str:
    """Render a UUID; unknown formats fall back to ``standard``."""
    if fmt == "no-hyphens":
        return value.hex
    if fmt == "uppercase":
        return str(value).upper()
    if fmt == "uppercase-no-hyphens":
        return value.hex.upper()
    return str(value)


def generate_uuids(
    version: str,
    count: int = 1,
    fmt: str = "standard",
    name: str = DEFAULT_NAME,
) -> list[str]:
    """Generate ``count`` formatted UUIDs of one version."""
    if version not in UUID_VERSIONS:
        raise UuidError(f"Unsupported UUID version: {version}")
    if count < 0:
        raise UuidError("Count must not be negative")
    return [format_uuid(new_uuid(version, name), fmt) for _ in range(count)]
