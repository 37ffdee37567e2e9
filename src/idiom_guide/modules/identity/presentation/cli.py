# src/idiom_guide/modules/identity/presentation/cli.py
"""
Interfaz de Línea de Comandos (CLI) para Identidad.

Arquitectura: Presentation Layer (Interface Adapter)
Responsabilidad:
    1. Parsear argumentos (argv).
    2. Instanciar el caso de uso.
    3. Formatear la salida (JSON/Tabla).
"""

import argparse
import json
import logging
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from idiom_guide.modules.identity.application.use_cases import RegisterPerson
from idiom_guide.modules.identity.domain.entities import PersonRecord
from idiom_guide.modules.identity.domain.exceptions import IdentityError, ValidationError
from idiom_guide.modules.identity.infrastructure.observability import configure_logging

EXIT_OK = 0
EXIT_VALIDATION = 2
EXIT_UNEXPECTED = 3
EXIT_INTERRUPTED = 130


def setup_parser() -> argparse.ArgumentParser:
    """Configura los argumentos aceptados por la herramienta."""
    parser = argparse.ArgumentParser(
        prog="idiom-guide",
        description="🪪 Idiom Guide - Validación de registros de persona",
        epilog="Ejemplo: idiom-guide john doe 1 --json",
    )

    parser.add_argument("name", help="Nombre (no vacío)")
    parser.add_argument("surname", help="Apellido (1 a 20 caracteres)")
    parser.add_argument("id", type=int, help="Identificador (entero >= 0)")

    parser.add_argument(
        "--json",
        action="store_true",
        help="Salida en formato JSON (útil para tuberías/pipes)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Muestra logs detallados",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Archivo donde persistir los logs (nivel DEBUG)",
    )

    return parser


def format_output_table(record: PersonRecord, console: Console):
    """Presentación amigable para humanos."""
    table = Table(title="✅ Registro válido", box=box.ROUNDED)
    table.add_column("Campo", style="cyan")
    table.add_column("Valor")

    for field, value in record.to_dict().items():
        table.add_row(field, str(value))

    console.print(table)


def format_output_json(record: PersonRecord):
    """Presentación para máquinas (Machine Readable)."""
    print(json.dumps(record.to_dict(), indent=2))


def main(argv=None) -> int:
    parser = setup_parser()
    args = parser.parse_args(argv)

    configure_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
    )

    console = Console()
    err_console = Console(stderr=True)

    try:
        record = RegisterPerson().execute(
            name=args.name, surname=args.surname, id=args.id
        )

        if args.json:
            format_output_json(record)
        else:
            format_output_table(record, console)
        return EXIT_OK

    except ValidationError as e:
        err_console.print(
            f"[bold red]❌ Campo inválido[/] [cyan]{e.field}[/]: {e.reason.describe()} ({escape(repr(e.value))})"
        )
        return EXIT_VALIDATION
    except IdentityError as e:
        err_console.print(f"[bold red]❌ Error de Identidad:[/] {escape(str(e))}")
        return EXIT_VALIDATION
    except KeyboardInterrupt:
        err_console.print("\n⚠️  Operación cancelada por el usuario.")
        return EXIT_INTERRUPTED
    except Exception as e:
        # Errores inesperados (Bugs)
        logging.getLogger("idiom_guide").exception("Error crítico no controlado")
        err_console.print(f"[bold red]❌ Error Crítico:[/] {escape(str(e))}")
        return EXIT_UNEXPECTED


def run():
    """Entry point de consola."""
    sys.exit(main())


if __name__ == "__main__":
    run()
