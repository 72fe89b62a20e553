"""Selector interactivo basado en fzf.

fzf recibe las líneas por stdin, oculta la columna del id
(`--with-nth=2..` con `--delimiter=\\t`) y escribe la línea elegida
completa en stdout. stderr se hereda: ahí dibuja fzf su interfaz.
"""

from __future__ import annotations

import subprocess
from typing import Sequence

from core.errors import SelectorError

FZF_OPTIONS: tuple[str, ...] = (
    "--with-nth=2..",
    "--height=15",
    "--style=minimal",
    "--color=dark",
    "--delimiter=\t",
)

# 1: ninguna coincidencia, 130: Esc/Ctrl-C.
CANCEL_EXIT_CODES = frozenset({1, 130})


class FzfSelector:
    """Implementación de `LineSelector` lanzando el binario de fzf."""

    def __init__(self, binary: str = "fzf", options: Sequence[str] = FZF_OPTIONS) -> None:
        self.binary = binary
        self.options = tuple(options)

    @property
    def command(self) -> list[str]:
        return [self.binary, *self.options]

    def select(self, lines: Sequence[str]) -> str:
        try:
            proc = subprocess.run(
                self.command,
                input="\n".join(lines),
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except OSError as exc:
            raise SelectorError(f"cannot start {self.binary!r}: {exc}") from exc

        if proc.returncode in CANCEL_EXIT_CODES:
            return ""
        if proc.returncode != 0:
            raise SelectorError(f"{self.binary} exited with status {proc.returncode}")
        return (proc.stdout or "").strip()
