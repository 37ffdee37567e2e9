# src/idiom_guide/modules/identity/domain/exceptions.py
"""
Excepciones del dominio de Identidad.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes de la presentación.
"""

from __future__ import annotations

from typing import Any

from idiom_guide.core.value_objects import ViolationKind


class IdentityError(Exception):
    """Clase base para errores en el módulo de identidad."""

    pass


class ValidationError(IdentityError, ValueError):
    """
    Un valor primitivo no cumple el invariante del tipo que lo envuelve.

    Atributos:
        field: Campo afectado ("name", "surname", "id").
        reason: Invariante incumplido (ViolationKind).
        value: Valor crudo rechazado.
    """

    def __init__(self, field: str, reason: ViolationKind, value: Any):
        self.field = field
        self.reason = reason
        self.value = value
        # El valor crudo no forma parte del mensaje: los mensajes acaban en los logs
        super().__init__(f"{field} inválido: {reason.describe()}")
