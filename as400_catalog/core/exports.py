"""Reading exported symbol names out of DB2 text output."""

import re

from as400_catalog.core.extraction.names import escape_for_pattern


def parse_export_symbols(srvpgm_name: str, text: str) -> list[str]:
    """Return the sorted, unique ``<SRVPGM>_<NAME>`` symbols found in ``text``.

    ``text`` is whatever ``db2`` printed for the export query: headers,
    separator rulers and the row count line are ignored because they never
    carry the service program prefix.
    """
    if not srvpgm_name or not text:
        return []
    pattern = re.compile(
        rf"(?<![\w$#@])({escape_for_pattern(srvpgm_name)}_[A-Z0-9$#@]+)(?![\w$#@])"
    )
    symbols: set[str] = set()
    for line in re.split(r"\r?\n", text):
        symbols.update(pattern.findall(line))
    return sorted(symbols)
