"""Comment line classification for RPG source members.

Three dialects are recognised:

- free-form ``//`` comments anywhere on the line
- ``**`` comments (SEU banners, ``**FREE`` headers)
- fixed-form comments with ``*`` in column 7
"""

from typing import NamedTuple

FREE_FORM_MARKER = "//"
ALTERNATE_MARKER = "**"
FIXED_FORM_COLUMN = 6  # 0-based index of column 7
FIXED_FORM_MARKER = "*"


class CommentLine(NamedTuple):
    """Classification of a single source line."""

    is_comment: bool
    content: str = ""


NOT_A_COMMENT = CommentLine(False, "")


def classify(line: str) -> CommentLine:
    """Classify ``line`` and return its comment text stripped of the marker."""
    stripped = line.strip()
    if not stripped:
        return NOT_A_COMMENT
    if stripped.startswith(FREE_FORM_MARKER):
        return CommentLine(True, stripped[len(FREE_FORM_MARKER):].strip())
    if stripped.startswith(ALTERNATE_MARKER):
        return CommentLine(True, stripped[len(ALTERNATE_MARKER):].strip())
    if len(line) > FIXED_FORM_COLUMN and line[FIXED_FORM_COLUMN] == FIXED_FORM_MARKER:
        return CommentLine(True, line[FIXED_FORM_COLUMN + 1:].strip())
    return NOT_A_COMMENT


def is_comment(line: str) -> bool:
    return classify(line).is_comment


def is_blank(line: str) -> bool:
    return not line.strip()
