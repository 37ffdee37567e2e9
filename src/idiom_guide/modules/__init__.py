"""📦 modules/ — Bounded contexts específicos

✨ Módulos actuales:
   • identity/     → Name, Surname, Id y el agregado PersonRecord
   • construction/ → Builder vs. argumentos con nombre vs. bean mutable
   • expressions/  → Clasificación de caracteres (if/elif vs. expresión)

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/         → Entidades y reglas del subdominio
   • application/    → Casos de uso
   • infrastructure/ → Adaptadores concretos (observabilidad)
   • presentation/   → CLI
"""
