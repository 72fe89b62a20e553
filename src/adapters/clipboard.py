"""Escritura en el portapapeles mediante utilidades del sistema.

El secreto viaja siempre por stdin, nunca como argumento: así no aparece en
`ps` ni en `/proc/<pid>/cmdline`.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys
from typing import Callable

from core.errors import ClipboardError

# Orden de preferencia en Linux: Wayland antes que X11.
LINUX_CANDIDATES: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


def detect_clipboard_command(
    override: str | None = None,
    *,
    platform: str | None = None,
    which: Callable[[str], str | None] = shutil.which,
) -> list[str] | None:
    """Resuelve el comando de portapapeles.

    Reglas:
    - `override` (CLIP_BIN) gana siempre; se parte al estilo shell.
    - macOS: `pbcopy`. Windows: `clip`.
    - Linux: el primer candidato de `LINUX_CANDIDATES` que esté en PATH.
    """

    if override and override.strip():
        return shlex.split(override)

    platform = platform or sys.platform
    if platform == "darwin":
        return ["pbcopy"]
    if platform.startswith("win"):
        return ["clip"]
    if platform.startswith("linux"):
        for candidate in LINUX_CANDIDATES:
            if which(candidate[0]):
                return list(candidate)
    return None


class SubprocessClipboard:
    """Implementación de `ClipboardWriter` sobre un comando externo."""

    def __init__(self, override: str | None = None) -> None:
        self.override = override

    def copy(self, text: str) -> None:
        command = detect_clipboard_command(self.override)
        if not command:
            raise ClipboardError(
                "no clipboard command found (set CLIP_BIN or install pbcopy/xclip/wl-copy)"
            )
        try:
            proc = subprocess.run(
                command,
                input=text.encode("utf-8"),
                stdout=subprocess.DEVNULL,
                check=False,
            )
        except OSError as exc:
            raise ClipboardError(f"cannot run {command[0]!r}: {exc}") from exc
        if proc.returncode != 0:
            raise ClipboardError(f"{command[0]} exited with status {proc.returncode}")
