"""Regex tester endpoints. Pattern errors come back in the body, not as 4xx."""

from fastapi import APIRouter, Depends

from toolbox.api.deps import require_api_token
from toolbox.api.schemas import RegexReplaceRequest, RegexTestRequest
from toolbox.tools import regex_tester
from toolbox.tools.types import MatchReport, ReplaceReport

router = APIRouter(
    prefix="/regex", tags=["regex"], dependencies=[Depends(require_api_token)]
)


@router.post("/test")
def run_test(body: RegexTestRequest) -> MatchReport:
    """POST /regex/test -- list matches of a pattern."""
    return regex_tester.test_regex(body.pattern, body.text, body.flags)


@router.post("/replace")
def run_replace(body: RegexReplaceRequest) -> ReplaceReport:
    """POST /regex/replace -- substitute matches of a pattern."""
    return regex_tester.replace_regex(
        body.pattern, body.text, body.replacement, body.flags
    )
