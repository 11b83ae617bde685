"""Describing a procedure from its name alone.

Exports follow ``<SRVPGM>_<VERB><OBJECT>``, e.g. ``SPVSPO_GETCABECERA``.
Descriptions are produced in Spanish, the language of the catalogued sources.
"""

VERB_PHRASES: dict[str, str] = {
    "CHK": "Verifica",
    "GET": "Obtiene",
    "SET": "Establece",
    "UPD": "Actualiza",
    "DLT": "Elimina",
    "IS": "Indica si",
    "INZ": "Inicialización",
    "END": "Fin",
    "ANULA": "Anula",
    "ULTSEC": "Última secuencia",
}

# Checked in order when no abbreviation matches
IRREGULAR_VERBS: tuple[tuple[str, str], ...] = (
    ("TIENE", "Indica si tiene"),
    ("PEND", "Pendiente"),
)

_WIDTHS = sorted({len(key) for key in VERB_PHRASES}, reverse=True)


def _match_verb(name: str) -> tuple[str, str] | None:
    for width in _WIDTHS:
        token = name[:width]
        if len(token) == width and token in VERB_PHRASES:
            return token, VERB_PHRASES[token]
    for token, phrase in IRREGULAR_VERBS:
        if name.startswith(token):
            return token, phrase
    return None


def infer_description(procedure_name: str) -> str | None:
    """Build a short description from ``procedure_name``.

    >>> infer_description("SPVSPO_GETCABECERA")
    'Obtiene cabecera'
    """
    _, underscore, rest = procedure_name.strip().upper().partition("_")
    name = rest if underscore else procedure_name.strip().upper()
    if not name:
        return None

    verb = _match_verb(name)
    if verb is None:
        return name.lower() or None

    token, phrase = verb
    remainder = name[len(token):].lower()
    return f"{phrase} {remainder}" if remainder else phrase
