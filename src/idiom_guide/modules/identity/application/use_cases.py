# src/idiom_guide/modules/identity/application/use_cases.py
"""
Casos de Uso para el módulo de Identidad.

Arquitectura: Application Layer
Responsabilidad: Convertir datos crudos (no confiables) en un PersonRecord válido.
"""
from __future__ import annotations

from idiom_guide.modules.identity.domain.entities import PersonRecord
from idiom_guide.modules.identity.infrastructure.observability import ObservabilityService


class RegisterPerson:
    """
    Caso de Uso: Registrar una persona a partir de primitivos.

    Política de errores: first-failure-wins. El primer campo inválido
    (en orden name -> surname -> id) detiene el proceso.
    """

    # ✅ Instrumentación: Medimos "Latency" y "Errors" automáticamente
    @ObservabilityService.measure_latency(operation_name="register_person")
    def execute(self, *, name: str, surname: str, id: int) -> PersonRecord:
        """
        Ejecuta el registro.

        Returns:
            PersonRecord inmutable y válido.

        Raises:
            ValidationError: Si algún campo incumple su invariante.
        """
        return PersonRecord.from_raw(name=name, surname=surname, id=id)
