"""Condensing raw descriptions to one bounded line."""

import re

MAX_DESCRIPTION_LENGTH = 280
ELLIPSIS = "..."

_LEADING_DASHES_RE = re.compile(r"^-+\s*")
_LEADING_SLASHES_RE = re.compile(r"^//\s*")
# "---- // SVPCOA_getCuota(): real description // author, date"
_BANNER_RE = re.compile(r"\):\s*([^/]+?)(?:\s*//|$)")
_SEGMENT_SPLIT_RE = re.compile(r"\s*//\s*")
_DASH_RUN_RE = re.compile(r"-+")
_LEADING_RULE_RE = re.compile(r"^[-/\s]+")


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def is_block_style(text: str) -> bool:
    """True for descriptions that still carry a dashed or ``//`` banner."""
    head = text.lstrip()
    return head.startswith("-") or head.startswith("//")


def truncate(text: str, max_length: int = MAX_DESCRIPTION_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def normalize(text: str) -> str:
    """Reduce ``text`` to a single line of at most 280 characters.

    Short text without a leading banner is returned untouched. Banner
    headers keep only the text after ``name():``; anything else keeps its
    first ``//`` segment with dash rulers flattened.
    """
    if not text:
        return ""
    if not is_block_style(text) and len(text) <= MAX_DESCRIPTION_LENGTH:
        return text

    body = _LEADING_DASHES_RE.sub("", text.lstrip(), count=1)
    body = _LEADING_SLASHES_RE.sub("", body, count=1).strip()

    banner = _BANNER_RE.search(body)
    if banner:
        result = collapse_whitespace(banner.group(1))[:MAX_DESCRIPTION_LENGTH]
    else:
        segments = [
            collapse_whitespace(_DASH_RUN_RE.sub(" ", segment))
            for segment in _SEGMENT_SPLIT_RE.split(body)
        ]
        segments = [segment for segment in segments if segment]
        result = truncate(segments[0] if segments else body)

    # keeps normalize(normalize(x)) == normalize(x)
    return _LEADING_RULE_RE.sub("", result).rstrip()
