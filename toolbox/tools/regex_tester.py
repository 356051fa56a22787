"""Regex testing and replacement with JavaScript-style flag strings.

Flags: ``i`` ignore case, ``m`` multi-line anchors, ``s`` dot matches
newline, ``x`` verbose, ``g`` global (all matches instead of the first).
Unknown flags are ignored. Pattern errors are reported in the result's
``error`` field rather than raised.
"""

import re
from collections.abc import Callable

from toolbox.tools.types import MatchReport, RegexMatch, ReplaceReport

_FLAG_BITS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}

# $$, ${name}, $name (longest run of ASCII letters, digits and underscores)
_TEMPLATE_REF = re.compile(r"\$(?:\$|\{([_0-9A-Za-z]+)\}|([_0-9A-Za-z]+))")


def compile_pattern(pattern: str, flags: str) -> re.Pattern[str]:
    """Compile ``pattern`` with the bits named in ``flags``."""
    bits = 0
    for flag in flags:
        bits |= _FLAG_BITS.get(flag, 0)
    return re.compile(pattern, bits)


def _to_match(match: re.Match[str]) -> RegexMatch:
    return RegexMatch(
        full_match=match.group(0),
        start=match.start(),
        end=match.end(),
        groups=[group for group in match.groups() if group is not None],
    )


def test_regex(pattern: str, text: str, flags: str = "") -> MatchReport:
    """Find the first match, or every match with the ``g`` flag."""
    try:
        compiled = compile_pattern(pattern, flags)
    except re.error as exc:
        return MatchReport(error=f"Invalid regex pattern: {exc}")

    if "g" in flags:
        return MatchReport(matches=[_to_match(m) for m in compiled.finditer(text)])
    first = compiled.search(text)
    return MatchReport(matches=[_to_match(first)] if first else [])


def _expander(template: str) -> Callable[[re.Match[str]], str]:
    """Build a replacement function for a ``$1`` / ``${name}`` template.

    References to groups that do not exist or did not participate in the
    match expand to an empty string.
    """

    def expand(match: re.Match[str]) -> str:
        def substitute(ref: re.Match[str]) -> str:
            if ref.group(0) == "$$":
                return "$"
            name = ref.group(1) or ref.group(2)
            try:
                value = match.group(int(name) if name.isdigit() else name)
            except IndexError:
                return ""
            return value or ""

        return _TEMPLATE_REF.sub(substitute, template)

    return expand


def replace_regex(
    pattern: str, text: str, replacement: str, flags: str = ""
) -> ReplaceReport:
    """Replace the first match, or every match with the ``g`` flag."""
    try:
        compiled = compile_pattern(pattern, flags)
    except re.error as exc:
        return ReplaceReport(error=f"Invalid regex pattern: {exc}")

    count = 0 if "g" in flags else 1
    result, replaced = compiled.subn(_expander(replacement), text, count=count)
    return ReplaceReport(result=result, count=replaced)
