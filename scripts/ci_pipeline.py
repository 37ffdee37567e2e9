#!/usr/bin/env python3
"""
Pipeline de CI Local para Idiom Guide.
Ejecuta lint, verificación de tipos del dominio y los tests (unitarios y E2E).

Uso: python scripts/ci_pipeline.py
"""

import subprocess
import sys
import time
from datetime import datetime

from rich.console import Console

console = Console()

# (título, comando, descripción, bloqueante)
STEPS = [
    (
        "1. ANÁLISIS ESTÁTICO DE CÓDIGO (LINTING)",
        "ruff check src/ tests/",
        "Verificando estilo de código (PEP8) y errores comunes",
        False,
    ),
    (
        "2. VERIFICACIÓN DE TIPOS (DOMINIO)",
        "mypy src/idiom_guide/core src/idiom_guide/modules/identity/domain --ignore-missing-imports",
        "Validando tipos en core y en el dominio de identidad",
        True,
    ),
    (
        "3. TESTS UNITARIOS",
        "pytest tests/core tests/modules -v",
        "Ejecutando dominio, aplicación y presentación",
        True,
    ),
    (
        "4. TESTS E2E",
        "pytest tests/e2e -v",
        "Validando escenarios completos",
        True,
    ),
]


def run_command(command: str, description: str) -> bool:
    console.print(f"⏳ {description}...")
    start = time.time()
    result = subprocess.run(command, shell=True, capture_output=True, text=True)
    duration = time.time() - start

    if result.returncode == 0:
        console.print(f"[green]✅ PASÓ ({duration:.2f}s)[/]")
        return True

    console.print(f"[red]❌ FALLÓ ({duration:.2f}s)[/]")
    console.print("[yellow]--- STDERR ---[/]")
    console.print(result.stderr, markup=False)
    console.print("[yellow]--- STDOUT ---[/]")
    console.print(result.stdout, markup=False)
    return False


def main():
    start_total = time.time()
    console.print("[bold]🚀 INICIANDO PIPELINE CI - IDIOM GUIDE[/]")
    console.print(f"📅 Fecha: {datetime.now()}")

    for title, command, description, blocking in STEPS:
        console.rule(f"[bold magenta]{title}[/]")
        if run_command(command, description):
            continue
        if blocking:
            sys.exit(1)
        console.print("[yellow]⚠️  Advertencias detectadas (No bloqueante)[/]")

    total_duration = time.time() - start_total
    console.rule("[bold green]🎉  BUILD SUCCESSFUL[/]")
    console.print(f"⏱️ Tiempo Total: {total_duration:.2f}s")


if __name__ == "__main__":
    main()
