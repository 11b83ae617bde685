"""Procedure documentation extraction from RPG source members."""

from as400_catalog.core.extraction.comments import CommentLine, classify
from as400_catalog.core.extraction.inference import infer_description
from as400_catalog.core.extraction.names import escape_for_pattern, resolve_declared_name
from as400_catalog.core.extraction.normalizer import MAX_DESCRIPTION_LENGTH, normalize
from as400_catalog.core.extraction.orchestrator import extract_descriptions

__all__ = [
    "CommentLine",
    "MAX_DESCRIPTION_LENGTH",
    "classify",
    "escape_for_pattern",
    "extract_descriptions",
    "infer_description",
    "normalize",
    "resolve_declared_name",
]
