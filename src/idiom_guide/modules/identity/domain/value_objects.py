# src/idiom_guide/modules/identity/domain/value_objects.py
"""
Value Objects de Identidad: Name, Surname, Id.

Arquitectura: Modular Monolith
Componente: Value Object (Domain)
Responsabilidad: Envolver un primitivo y garantizar su invariante al construirse.
"""

from __future__ import annotations

from dataclasses import dataclass

from idiom_guide.core.value_objects import check_non_negative, check_text

from .exceptions import ValidationError

# === 🧭 Protocolos Arquitectónicos ===
# ✅ CORE: Solo depende de reglas universales de core/.
# 🔒 Inmutabilidad: frozen=True. Validados una única vez, en __post_init__.

SURNAME_MAX_LENGTH = 20


@dataclass(frozen=True)
class Name:
    """
    Nombre de pila.

    Invariantes:
    1. No vacío
    """

    value: str

    def __post_init__(self):
        violation = check_text(self.value)
        if violation is not None:
            raise ValidationError("name", violation, self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Surname:
    """
    Apellido.

    Invariantes:
    1. No vacío
    2. len(value) <= SURNAME_MAX_LENGTH
    """

    value: str

    def __post_init__(self):
        violation = check_text(self.value, max_length=SURNAME_MAX_LENGTH)
        if violation is not None:
            raise ValidationError("surname", violation, self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Id:
    """Identificador numérico no negativo."""

    value: int

    def __post_init__(self):
        violation = check_non_negative(self.value)
        if violation is not None:
            raise ValidationError("id", violation, self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value
