"""Running the extraction passes over one source member."""

import re
from collections.abc import Callable, Iterable, Sequence

from loguru import logger

from as400_catalog.core.extraction.block_headers import extract_block_headers
from as400_catalog.core.extraction.inline_labels import extract_inline_labels
from as400_catalog.core.extraction.normalizer import collapse_whitespace, normalize

Strategy = Callable[[Sequence[str], Sequence[str]], dict[str, str]]

# Highest priority first; an earlier strategy's description is never replaced
DESCRIPTION_STRATEGIES: tuple[tuple[str, Strategy], ...] = (
    ("inline_labels", extract_inline_labels),
    ("block_headers", extract_block_headers),
)

_LINE_BREAK_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    return _LINE_BREAK_RE.split(text)


def _ordered_names(expected_names: Iterable[str]) -> list[str]:
    if isinstance(expected_names, (set, frozenset)):
        expected_names = sorted(expected_names)
    return [name for name in dict.fromkeys(expected_names) if name]


def extract_descriptions(
    source_text: str | None,
    expected_names: Iterable[str],
) -> dict[str, str]:
    """Map each documented procedure in ``expected_names`` to a description.

    Undocumented procedures are simply absent from the result. Sets are
    iterated in sorted order so suffix ties resolve the same way every run.
    """
    names = _ordered_names(expected_names)
    if not source_text or not names:
        return {}

    lines = split_lines(source_text)
    result: dict[str, str] = {}
    for label, strategy in DESCRIPTION_STRATEGIES:
        found = strategy(lines, names)
        added = 0
        for name, description in found.items():
            if name in result:
                continue
            description = normalize(collapse_whitespace(description))
            if description:
                result[name] = description
                added += 1
        logger.debug(f"{label}: {added} new of {len(found)} found ({len(names)} expected)")
    return result
