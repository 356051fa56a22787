"""Type definitions for the URL, regex and UUID tools."""

from pydantic import BaseModel, Field


class UrlParts(BaseModel):
    """Components of an absolute URL, as edited in the URL builder."""

    protocol: str = ""
    username: str = ""
    password: str = ""
    hostname: str = ""
    port: str = ""
    pathname: str = ""
    search: str = ""
    hash: str = ""


class ParsedUrl(BaseModel):
    """A parsed URL plus its decoded query parameters."""

    parts: UrlParts
    params: dict[str, str | list[str]] = Field(default_factory=dict)


class RegexMatch(BaseModel):
    """One match of a pattern, with its captured groups."""

    full_match: str
    start: int
    end: int
    groups: list[str] = Field(default_factory=list)


class MatchReport(BaseModel):
    """Result of testing a pattern against some text."""

    matches: list[RegexMatch] = Field(default_factory=list)
    error: str | None = None


class ReplaceReport(BaseModel):
    """Result of a pattern replacement."""

    result: str = ""
    count: int = 0
    error: str | None = None


class ParsedUuid(BaseModel):
    """Description of a parsed UUID."""

    is_valid: bool = True
    standard_format: str
    raw_contents: str
    version: str
    variant: str
