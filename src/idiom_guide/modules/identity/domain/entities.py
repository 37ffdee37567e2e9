# src/idiom_guide/modules/identity/domain/entities.py
"""
Agregado PersonRecord.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Componer Name, Surname e Id ya validados en un registro inmutable.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

# === Imports del Mismo Módulo ===
from .value_objects import Id, Name, Surname

# === Guía de Organización ===
# ✅ COMPOSICIÓN: La validez del agregado se deriva de la validez de sus partes.
#    No existe un paso de validación a nivel de agregado.
# 🔒 INMUTABLE: Las "modificaciones" devuelven un registro nuevo.


@dataclass(frozen=True)
class PersonRecord:
    """
    Agregado que representa a una persona identificada.
    """

    name: Name
    surname: Surname
    id: Id

    @classmethod
    def from_raw(cls, *, name: str, surname: str, id: int) -> PersonRecord:
        """
        Factory method a partir de primitivos sin validar.

        Envuelve los campos en orden (name -> surname -> id). El primer campo
        inválido lanza ValidationError y el agregado nunca llega a construirse.
        """
        return cls(name=Name(name), surname=Surname(surname), id=Id(id))

    def with_name(self, name: Name) -> PersonRecord:
        return replace(self, name=name)

    def with_surname(self, surname: Surname) -> PersonRecord:
        return replace(self, surname=surname)

    def with_id(self, id: Id) -> PersonRecord:
        return replace(self, id=id)

    def to_dict(self) -> dict[str, Any]:
        """Vista de primitivos para presentación (JSON, tablas)."""
        return {
            "name": self.name.value,
            "surname": self.surname.value,
            "id": self.id.value,
        }


@dataclass(frozen=True)
class RawPersonRecord:
    """
    Contraejemplo: el mismo registro con primitivos sin envolver.

    Acepta cualquier valor (ids negativos, apellidos vacíos, campos
    intercambiados). Solo to_record() aplica los invariantes.
    """

    name: str
    surname: str
    id: int

    def to_record(self) -> PersonRecord:
        """Convierte a PersonRecord; lanza ValidationError en el primer campo inválido."""
        return PersonRecord.from_raw(name=self.name, surname=self.surname, id=self.id)
