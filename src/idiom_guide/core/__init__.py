"""📦 core/ — Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Reglas de validación reusables en CUALQUIER dominio:
     - texto no vacío, texto acotado, número no negativo
   • Helpers genéricos SIN dependencia de negocio

🚫 ¿Qué NO pertenece aquí?
   • Tipos específicos del dominio (Name, Surname, PersonRecord)
   • Excepciones con semántica de negocio (ValidationError de identity)

✅ Dónde poner lo específico del dominio:
   → modules/{bounded_context}/domain/

💡 Principio preventivo:
   Si no podrías reusar este código en un sistema de pagos O un e-commerce,
   probablemente NO pertenece a core/.
"""

from .value_objects import ViolationKind, check_non_negative, check_text

__all__ = ["ViolationKind", "check_text", "check_non_negative"]
