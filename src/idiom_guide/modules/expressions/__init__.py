"""
Módulo de Expresiones: clasificación de caracteres.
"""

from .domain.classification import (
    OTHER_CHARS,
    SOME_CHARS,
    CharCategory,
    classify_char,
    classify_char_lookup,
)

__all__ = [
    "SOME_CHARS",
    "OTHER_CHARS",
    "CharCategory",
    "classify_char",
    "classify_char_lookup",
]
