"""Pass 2: comment blocks written above exported procedure declarations.

Handles free-form ``DCL-PROC name EXPORT`` and fixed-form ``P name B EXPORT``
declarations.
"""

import re
from collections.abc import Collection, Sequence

from as400_catalog.core.extraction.comments import classify, is_blank
from as400_catalog.core.extraction.names import resolve_declared_name
from as400_catalog.core.extraction.normalizer import normalize

# RPG identifiers may contain $, # and @
_NAME = r"[\w$#@]+"
_NAME_END = r"(?![\w$#@])"

FREE_DECLARATION_RE = re.compile(
    rf"\bDCL-PROC\s+({_NAME}){_NAME_END}.*\bEXPORT\b", re.IGNORECASE
)
LOOSE_DECLARATION_RE = re.compile(rf"(?<![\w$#@])({_NAME})\s+.*\bEXPORT\b", re.IGNORECASE)
FIXED_DECLARATION_RE = re.compile(rf"^P\s+({_NAME})\s+.*\bEXPORT\b", re.IGNORECASE)

_LEADING_MARKERS_RE = re.compile(r"^(?:(?://+|\*+)\s*)+")
_DECORATIVE_RE = re.compile(r"^[-*/\s]+$")


def find_declared_name(line: str) -> str | None:
    """Return the upper-cased identifier of an exported declaration on ``line``."""
    if classify(line).is_comment:
        return None
    text = line.strip()
    match = FREE_DECLARATION_RE.search(text)
    if match is None:
        # a P-spec must not hand its record type letter to the loose pattern
        match = FIXED_DECLARATION_RE.match(text) or LOOSE_DECLARATION_RE.search(text)
    if match is None:
        return None
    return match.group(1).upper()


def strip_comment_markers(text: str) -> str:
    return _LEADING_MARKERS_RE.sub("", text).strip()


def is_decorative(text: str) -> bool:
    return bool(_DECORATIVE_RE.match(text))


def harvest_comment_block(lines: Sequence[str], decl_index: int) -> tuple[list[str], int]:
    """Collect the comment block directly above ``lines[decl_index]``.

    Walks upwards over comment and blank lines. Decorative rulers are dropped
    and the surviving text keeps its top-to-bottom order.

    Returns:
        The fragments and the index of the first line of the block.
    """
    fragments: list[str] = []
    index = decl_index - 1
    while index >= 0:
        line = lines[index]
        if not is_blank(line):
            comment = classify(line)
            if not comment.is_comment:
                break
            text = strip_comment_markers(comment.content)
            if text and not is_decorative(text):
                fragments.insert(0, text)
        index -= 1
    return fragments, index + 1


def extract_block_headers(
    lines: Sequence[str],
    names: Sequence[str],
    skip: Collection[str] = (),
) -> dict[str, str]:
    """Describe each declared export by the comment block above it.

    Names in ``skip`` are already described and are left out of the result.
    """
    result: dict[str, str] = {}
    for index, line in enumerate(lines):
        declared = find_declared_name(line)
        if declared is None:
            continue
        name = resolve_declared_name(declared, names)
        if name is None or name in skip or name in result:
            continue
        fragments, _ = harvest_comment_block(lines, index)
        description = normalize(" ".join(" ".join(fragments).split()))
        if description:
            result[name] = description
    return result
