# src/idiom_guide/modules/construction/domain/entities.py
"""
Estilos de construcción: Builder vs. argumentos con nombre vs. bean mutable.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Ofrecer las tres formas de armar una persona para compararlas.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

# === Guía de Organización ===
# ✅ PREFERIDO: Person(name=..., surname=..., age=..., nick_name=...)
#    Los argumentos con nombre hacen innecesario el Builder.
# ⚠️ PersonBuilder y PersonBean se mantienen como contraejemplos ejecutables.


@dataclass(frozen=True)
class Person:
    """Persona inmutable. Sin invariantes: solo ilustra la construcción."""

    name: str = ""
    surname: str = ""
    age: int = 0
    nick_name: str = ""

    @classmethod
    def builder(cls) -> PersonBuilder:
        return PersonBuilder()


class PersonBuilder:
    """
    Builder fluido: acumula campos y produce un Person.
    Cada setter devuelve el propio builder para encadenar llamadas.
    """

    def __init__(self):
        self._name = ""
        self._surname = ""
        self._age = 0
        self._nick_name = ""

    def set_name(self, name: str) -> PersonBuilder:
        self._name = name
        return self

    def set_surname(self, surname: str) -> PersonBuilder:
        self._surname = surname
        return self

    def set_age(self, age: int) -> PersonBuilder:
        self._age = age
        return self

    def set_nick_name(self, nick_name: str) -> PersonBuilder:
        self._nick_name = nick_name
        return self

    def build(self) -> Person:
        return Person(
            name=self._name,
            surname=self._surname,
            age=self._age,
            nick_name=self._nick_name,
        )


@dataclass
class PersonBean:
    """
    Registro mutable que se rellena atributo por atributo.
    """

    name: str = ""
    surname: str = ""
    age: int = 0
    nick_name: str = ""

    def apply(self, **values: Any) -> PersonBean:
        """
        Asigna varios campos en una sola llamada y devuelve el propio bean.

        Raises:
            AttributeError: Si algún nombre no es un campo del bean.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise AttributeError(f"Campos desconocidos para PersonBean: {unknown}")

        for key, value in values.items():
            setattr(self, key, value)
        return self
