"""Contratos de los colaboradores externos.

Por qué Protocol:
- El pipeline depende de estas formas, no de httpx ni de subprocess.
- Los tests sustituyen fzf, el portapapeles y la API por fakes sin herencia.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import PasswordDetail, SearchHit


@runtime_checkable
class VaultClient(Protocol):
    """Las tres llamadas remotas que necesita el flujo."""

    def close(self) -> None:
        ...

    def login(self) -> str:
        """Canjea la API key por un token de sesión."""

        ...

    def search(self, token: str, query: str) -> list[SearchHit]:
        ...

    def get_password(self, token: str, password_id: str) -> PasswordDetail:
        ...


@runtime_checkable
class LineSelector(Protocol):
    def select(self, lines: Sequence[str]) -> str:
        """Devuelve la línea elegida, o "" si el usuario cancela."""

        ...


@runtime_checkable
class ClipboardWriter(Protocol):
    def copy(self, text: str) -> None:
        """Escribe `text` en el portapapeles; lanza `ClipboardError` si falla."""

        ...
