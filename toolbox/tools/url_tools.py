"""URL percent-encoding, parsing and building."""

import string
from urllib.parse import SplitResult, unquote, unquote_to_bytes, urlsplit

from toolbox.core.errors import UrlError
from toolbox.tools.types import ParsedUrl, UrlParts

_UNRESERVED = frozenset((string.ascii_letters + string.digits).encode())


def encode_component(text: str) -> str:
    """Percent-encode every byte that is not an ASCII letter or digit."""
    return "".join(
        chr(byte) if byte in _UNRESERVED else f"%{byte:02X}"
        for byte in text.encode()
    )


def decode_component(text: str) -> str:
    """Percent-decode ``text``; the decoded bytes must be UTF-8."""
    try:
        return unquote_to_bytes(text).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UrlError(f"Failed to decode: {exc}") from exc


def _split(url: str, context: str = "Failed to parse URL") -> tuple[SplitResult, str]:
    """Split ``url`` and validate its scheme and port."""
    try:
        parsed = urlsplit(url.strip())
        port = parsed.port
    except ValueError as exc:
        raise UrlError(f"{context}: {exc}") from exc
    if not parsed.scheme:
        raise UrlError(f"{context}: relative URL without a base")
    return parsed, "" if port is None else str(port)


def parse_query(query: str) -> dict[str, str | list[str]]:
    """Decode a query string; repeated keys collect into a list.

    Pairs whose value is not valid UTF-8 once percent-decoded are skipped.
    A key that fails to decode is kept as written.
    """
    params: dict[str, str | list[str]] = {}
    for pair in query.split("&"):
        if not pair:
            continue
        raw_key, _, raw_value = pair.partition("=")
        try:
            value = unquote(raw_value, errors="strict")
        except UnicodeDecodeError:
            continue
        try:
            key = unquote(raw_key, errors="strict")
        except UnicodeDecodeError:
            key = raw_key
        existing = params.get(key)
        if existing is None:
            params[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            params[key] = [existing, value]
    return params


def parse_url(url: str) -> ParsedUrl:
    """Split an absolute URL into its parts and query parameters."""
    parsed, port = _split(url)
    parts = UrlParts(
        protocol=parsed.scheme,
        username=parsed.username or "",
        password=parsed.password or "",
        hostname=parsed.hostname or "",
        port=port,
        pathname=parsed.path or ("/" if parsed.netloc else ""),
        search=parsed.query,
        hash=parsed.fragment,
    )
    return ParsedUrl(parts=parts, params=parse_query(parsed.query))


def _encode_search(search: str) -> str:
    """Encode one ``key=value`` (or bare ``key``) per line into a query."""
    params = []
    for raw_line in search.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        key, sep, value = line.partition("=")
        if sep:
            params.append(f"{encode_component(key)}={encode_component(value)}")
        else:
            params.append(encode_component(line))
    return "&".join(params)


def build_url(parts: UrlParts) -> str:
    """Assemble a URL from its parts; protocol and hostname are required."""
    if not parts.protocol:
        raise UrlError("Protocol is required")
    if not parts.hostname:
        raise UrlError("Hostname is required")

    url = parts.protocol if parts.protocol.endswith("://") else f"{parts.protocol}://"
    if parts.username:
        url += encode_component(parts.username)
        if parts.password:
            url += ":" + encode_component(parts.password)
        url += "@"
    url += parts.hostname
    if parts.port:
        url += ":" + parts.port
    if parts.pathname:
        if not parts.pathname.startswith("/"):
            url += "/"
        url += parts.pathname
    if parts.search:
        url += "?" + _encode_search(parts.search)
    if parts.hash:
        url += "#" + parts.hash.removeprefix("#")

    _split(url, context="Invalid URL")
    return url
