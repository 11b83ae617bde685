"""Matching declared procedure identifiers to exported symbol names."""

import re
from collections.abc import Iterable


def escape_for_pattern(name: str) -> str:
    """Escape ``name`` so it can be embedded in a regular expression."""
    return re.escape(name)


def resolve_declared_name(declared_name: str, expected_names: Iterable[str]) -> str | None:
    """Resolve an identifier found in source to one of ``expected_names``.

    An exact match (ignoring case) wins. Otherwise the first expected name
    ending in ``_<declared_name>`` is returned, which covers the usual
    ``SRVPGM_PROCNAME`` export convention. When several expected names share
    that suffix the first one in iteration order is used.

    Returns:
        The matching expected name as given by the caller, or None.
    """
    declared = declared_name.strip().upper()
    if not declared:
        return None

    candidates = list(expected_names)
    for name in candidates:
        if name.upper() == declared:
            return name

    suffix = f"_{declared}"
    for name in candidates:
        if name.upper().endswith(suffix):
            return name
    return None
