# tests/modules/identity/domain/test_entities.py
"""
Tests unitarios para el agregado PersonRecord.
Foco: Composición de partes válidas, inmutabilidad y first-failure-wins.
"""

import dataclasses

import pytest

from idiom_guide.core.value_objects import ViolationKind
from idiom_guide.modules.identity.domain.entities import PersonRecord, RawPersonRecord
from idiom_guide.modules.identity.domain.exceptions import ValidationError
from idiom_guide.modules.identity.domain.value_objects import Id, Name, Surname


# === Fixtures ===
@pytest.fixture
def john_doe():
    return PersonRecord(Name("john"), Surname("doe"), Id(1))


# === Casos de Prueba ===


def test_record_from_valid_parts(john_doe):
    """
    Escenario: Se compone un registro con wrappers válidos.
    Resultado: Siempre se construye y expone los wrappers.
    """
    assert john_doe.name == Name("john")
    assert john_doe.surname == Surname("doe")
    assert john_doe.id == Id(1)


def test_record_is_immutable(john_doe):
    with pytest.raises(dataclasses.FrozenInstanceError):
        john_doe.id = Id(2)


def test_with_id_returns_new_record(john_doe):
    """
    Escenario: Se "actualiza" el Id.
    Resultado: Se obtiene un registro nuevo; el original no cambia.
    """
    # Act
    updated = john_doe.with_id(Id(2))

    # Assert
    assert updated.id == Id(2)
    assert john_doe.id == Id(1)
    assert updated.name is john_doe.name


def test_with_name_and_surname(john_doe):
    updated = john_doe.with_name(Name("jane")).with_surname(Surname("roe"))

    assert updated.to_dict() == {"name": "jane", "surname": "roe", "id": 1}
    assert john_doe.to_dict() == {"name": "john", "surname": "doe", "id": 1}


def test_from_raw_builds_equal_record(john_doe):
    assert PersonRecord.from_raw(name="john", surname="doe", id=1) == john_doe


def test_from_raw_requires_keywords():
    with pytest.raises(TypeError):
        PersonRecord.from_raw("john", "doe", 1)


def test_invalid_id_surfaces_id_error_not_record_error():
    """
    Escenario: Name y Surname válidos, Id negativo.
    Resultado: El error visible es el de Id; el agregado nunca se construye.
    """
    with pytest.raises(ValidationError) as exc_info:
        PersonRecord(Name("john"), Surname("doe"), Id(-1))

    assert exc_info.value.field == "id"
    assert exc_info.value.reason is ViolationKind.NEGATIVE


def test_first_invalid_field_wins():
    """
    Regla: first-failure-wins.
    Escenario: Surname e Id inválidos a la vez.
    Resultado: Solo se reporta Surname (primer campo envuelto).
    """
    with pytest.raises(ValidationError) as exc_info:
        PersonRecord.from_raw(name="john", surname="", id=-1)

    assert exc_info.value.field == "surname"


# === Contraejemplo sin wrappers ===


def test_raw_record_accepts_invalid_values_silently():
    """
    Escenario: Registro de primitivos con apellido vacío e id negativo.
    Resultado: Se construye sin quejarse; el error queda oculto.
    """
    raw = RawPersonRecord(name="john", surname="", id=-1)

    assert raw.id == -1


def test_raw_record_accepts_swapped_fields():
    """Con primitivos, intercambiar campos no produce ningún error."""
    raw = RawPersonRecord("doe", "john", 1)

    assert raw.name == "doe"


def test_raw_record_to_record_applies_invariants():
    """
    Escenario: Se convierte el registro crudo al agregado validado.
    Resultado: El primer campo inválido (surname) aflora como ValidationError.
    """
    raw = RawPersonRecord(name="john", surname="", id=-1)

    with pytest.raises(ValidationError) as exc_info:
        raw.to_record()

    assert exc_info.value.field == "surname"


def test_raw_record_to_record_with_valid_values():
    raw = RawPersonRecord(name="john", surname="doe", id=1)

    assert raw.to_record() == PersonRecord(Name("john"), Surname("doe"), Id(1))
