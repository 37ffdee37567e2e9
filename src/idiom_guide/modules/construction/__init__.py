"""
Módulo de Construcción: Builder frente a argumentos con nombre.
"""

from .domain.entities import Person, PersonBean, PersonBuilder

__all__ = ["Person", "PersonBuilder", "PersonBean"]
