# src/idiom_guide/modules/expressions/domain/classification.py
"""
Clasificación de caracteres: cadena if/elif frente a expresión.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Asignar una categoría a un único carácter.
"""

from __future__ import annotations

from enum import Enum

SOME_CHARS = frozenset({"I", "N", "J"})
OTHER_CHARS = frozenset({"A", "B", "C"})


class CharCategory(Enum):
    SOME_CHARS = "some chars"
    OTHER_CHARS = "other chars"
    OTHER = "other"


def _require_single_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"Se esperaba un único carácter, se recibió: {char!r}")


def classify_char(char: str) -> CharCategory:
    """Versión imperativa. Sensible a mayúsculas: 'j' -> OTHER."""
    _require_single_char(char)
    if char in SOME_CHARS:
        return CharCategory.SOME_CHARS
    elif char in OTHER_CHARS:
        return CharCategory.OTHER_CHARS
    else:
        return CharCategory.OTHER


# Tabla de búsqueda: el orden importa si un carácter aparece en ambos conjuntos
_LOOKUP = {
    **{c: CharCategory.OTHER_CHARS for c in OTHER_CHARS},
    **{c: CharCategory.SOME_CHARS for c in SOME_CHARS},
}


def classify_char_lookup(char: str) -> CharCategory:
    """Versión como expresión; mismo resultado que classify_char."""
    _require_single_char(char)
    return _LOOKUP.get(char, CharCategory.OTHER)
