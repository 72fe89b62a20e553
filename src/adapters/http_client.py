"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeout, headers y base_url para todas las llamadas a Passwork.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Sin reintentos: un timeout falla la etapa igual que cualquier otro error HTTP.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings

MAX_ERROR_BODY_BYTES = 4096


def build_client(
    settings: AppSettings,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono apuntando a la API.

    Por qué un builder:
    - Centraliza timeouts/headers para que login, búsqueda y detalle se
      comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.require_base_url(),
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def body_excerpt(response: httpx.Response) -> str:
    """Primeros bytes del cuerpo, para mensajes de error."""

    try:
        raw = response.read()
    except httpx.HTTPError:
        return ""
    return raw[:MAX_ERROR_BODY_BYTES].decode("utf-8", errors="replace")
