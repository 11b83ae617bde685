"""Pass 1: inline ``NAME : description`` labels inside comments.

SEU-maintained members often document each export as::

    * SPVSPO_getCabecera : Retrieves the policy header for
    *                      the given contract
    * SPVSPO_updCabecera : ...

The label may carry an empty ``()`` after the name. The description keeps
going on the following comment lines until another label starts.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from as400_catalog.core.extraction.comments import classify
from as400_catalog.core.extraction.names import escape_for_pattern

_TRAILING_STARS_RE = re.compile(r"\s*\*+\s*$")


def trim_decoration(text: str) -> str:
    """Drop trailing ``*`` box borders and surrounding whitespace."""
    return _TRAILING_STARS_RE.sub("", text).strip()


@dataclass(frozen=True)
class LabelPatterns:
    """Compiled label patterns for one set of expected names."""

    by_name: dict[str, re.Pattern[str]]
    any_header: re.Pattern[str] | None

    @classmethod
    def build(cls, names: Sequence[str]) -> "LabelPatterns":
        by_name = {
            name: re.compile(
                rf"^\s*{escape_for_pattern(name)}\s*(?:\(\))?\s*:\s*(.+)$",
                re.IGNORECASE,
            )
            for name in names
        }
        any_header = None
        if names:
            alternatives = "|".join(escape_for_pattern(name) for name in names)
            any_header = re.compile(
                rf"^\s*(?:{alternatives})\s*(?:\(\))?\s*:", re.IGNORECASE
            )
        return cls(by_name=by_name, any_header=any_header)

    def is_header(self, text: str) -> bool:
        """True when ``text`` starts a label for any expected name."""
        return bool(self.any_header and self.any_header.match(text))


def scan_continuation(
    lines: Sequence[str],
    start: int,
    patterns: LabelPatterns,
) -> tuple[list[str], int]:
    """Collect continuation text for a label starting at ``start``.

    Reads comment lines from ``start`` onwards. Empty lines (after trimming)
    are skipped, and the scan stops at the first non-comment line or at a
    line that opens another label.

    Returns:
        The continuation fragments and the index where scanning stopped.
    """
    parts: list[str] = []
    index = start
    while index < len(lines):
        comment = classify(lines[index])
        if not comment.is_comment:
            break
        text = trim_decoration(comment.content)
        if text:
            if patterns.is_header(text):
                break
            parts.append(text)
        index += 1
    return parts, index


def extract_inline_labels(
    lines: Sequence[str],
    names: Sequence[str],
    patterns: LabelPatterns | None = None,
) -> dict[str, str]:
    """Find ``NAME : description`` labels for each of ``names``.

    A name is captured at most once; the first label wins.
    """
    if patterns is None:
        patterns = LabelPatterns.build(names)

    result: dict[str, str] = {}
    for index, line in enumerate(lines):
        content = classify(line).content
        if not content:
            continue
        for name, pattern in patterns.by_name.items():
            if name in result:
                continue
            match = pattern.match(content)
            if not match:
                continue
            parts, _ = scan_continuation(lines, index + 1, patterns)
            description = " ".join(" ".join([trim_decoration(match.group(1)), *parts]).split())
            if description:
                result[name] = description
            break
    return result
