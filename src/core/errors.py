"""Errores del Core.

Por qué una jerarquía propia:
- La CLI decide el código de salida mirando solo `PwfzError.exit_code`.
- Cada etapa (login, búsqueda, detalle, fzf, portapapeles) tiene su tipo,
  así el mensaje en stderr dice dónde falló sin inspeccionar trazas.
"""

from __future__ import annotations


class PwfzError(Exception):
    """Error fatal: aborta la ejecución con `exit_code`."""

    exit_code: int = 1
    stage: str = "pwfz"


class ConfigError(PwfzError):
    stage = "config"


class AuthError(PwfzError):
    stage = "login"


class SearchError(PwfzError):
    stage = "search"


class FetchError(PwfzError):
    """Fallo al obtener el detalle de un id.

    Lo recupera el pipeline: se avisa y se omite ese id.
    """

    stage = "fetch"


class SelectorError(PwfzError):
    stage = "fzf"


class ClipboardError(PwfzError):
    stage = "clipboard"


class NotFoundError(PwfzError):
    stage = "select"


class EmptySecretError(PwfzError):
    stage = "select"


class DecodeWarning(PwfzError):
    """Valor que no es base64/UTF-8 válido. Nunca sale del pipeline."""

    stage = "decode"
