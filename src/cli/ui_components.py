"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- `pwfz` y `pwfz-doctor` comparten consolas y formato de errores/avisos.

Todo lo que no es el resultado final va a stderr: stdout queda limpio para
scripts.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.errors import PwfzError
from core.services.vault_pipeline import PipelineHooks


def build_consoles() -> tuple[Console, Console]:
    """Consola de salida (stdout) y de diagnóstico (stderr)."""

    return Console(soft_wrap=True), Console(stderr=True, soft_wrap=True)


def print_error(console: Console, exc: PwfzError) -> None:
    console.print(f"[bold red]{exc.stage} error:[/bold red] {escape(str(exc))}")


def print_warning(console: Console, message: str) -> None:
    console.print(f"[yellow]warning:[/yellow] {escape(message)}")


def print_info(console: Console, message: str) -> None:
    console.print(escape(message), style="dim")


def build_hooks(console: Console, *, verbose: bool = False) -> PipelineHooks:
    """Conecta los avisos del pipeline con la consola de stderr."""

    return PipelineHooks(
        warning=lambda message: print_warning(console, message),
        info=(lambda message: print_info(console, message)) if verbose else None,
    )


def build_checks_table() -> Table:
    """Tabla de diagnóstico para `pwfz-doctor`."""

    table = Table(title="pwfz doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
