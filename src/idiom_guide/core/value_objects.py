"""
Reglas de validación universales.

Arquitectura: Core (Shared Kernel)
Responsabilidad: Detectar violaciones de invariantes sobre primitivos
(texto vacío, texto demasiado largo, número negativo) sin conocer el dominio.
"""

from __future__ import annotations

from enum import Enum

# === Guía de Organización ===
# ✅ PUREZA: Las funciones devuelven la violación detectada, NO lanzan.
#    Cada bounded context decide qué excepción semántica construir.


class ViolationKind(Enum):
    """Tipos de invariante que un valor primitivo puede incumplir."""

    WRONG_TYPE = "wrong_type"
    EMPTY = "empty"
    TOO_LONG = "too_long"
    NEGATIVE = "negative"

    def describe(self) -> str:
        """Texto legible para mensajes de error."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ViolationKind.WRONG_TYPE: "tiene un tipo no admitido",
    ViolationKind.EMPTY: "no puede estar vacío",
    ViolationKind.TOO_LONG: "excede la longitud máxima",
    ViolationKind.NEGATIVE: "no puede ser negativo",
}


def check_text(value: str, max_length: int | None = None) -> ViolationKind | None:
    """
    Valida un texto no vacío y, opcionalmente, con longitud acotada.

    Returns:
        La violación encontrada o None si el texto es válido.
    """
    if not isinstance(value, str):
        return ViolationKind.WRONG_TYPE
    if not value:
        return ViolationKind.EMPTY
    if max_length is not None and len(value) > max_length:
        return ViolationKind.TOO_LONG
    return None


def check_non_negative(value: int) -> ViolationKind | None:
    """Valida que un entero (bool excluido) sea >= 0."""
    if isinstance(value, bool) or not isinstance(value, int):
        return ViolationKind.WRONG_TYPE
    if value < 0:
        return ViolationKind.NEGATIVE
    return None
