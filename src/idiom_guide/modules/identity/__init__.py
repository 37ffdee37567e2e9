# src/idiom_guide/modules/identity/__init__.py
"""
Módulo de Identidad: wrappers validados y agregado PersonRecord.
"""

from __future__ import annotations

# Application
from .application.use_cases import RegisterPerson

# Domain
from .domain.entities import PersonRecord, RawPersonRecord
from .domain.exceptions import IdentityError, ValidationError
from .domain.value_objects import SURNAME_MAX_LENGTH, Id, Name, Surname

__all__ = [
    "Name",
    "Surname",
    "Id",
    "SURNAME_MAX_LENGTH",
    "PersonRecord",
    "RawPersonRecord",
    "IdentityError",
    "ValidationError",
    "RegisterPerson",
]
