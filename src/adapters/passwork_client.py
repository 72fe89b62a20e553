"""Cliente de la API de Passwork.

Responsabilidad:
- `POST /auth/login/{apiKey}`  -> token de sesión.
- `POST /passwords/search`     -> lista de `{id, name}`.
- `GET  /passwords/{id}`       -> `PasswordDetail` completo.

Cada llamada valida HTTP 200, JSON, esquema y `status == "success"`; cualquier
otra cosa se traduce al error de su etapa (`AuthError`, `SearchError`,
`FetchError`). El token y la API key nunca aparecen en los mensajes.
"""

from __future__ import annotations

from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from adapters.http_client import body_excerpt, build_client
from core.config import AppSettings
from core.domain.models import (
    SUCCESS_STATUS,
    ApiEnvelope,
    LoginResponse,
    PasswordDetail,
    PasswordResponse,
    SearchHit,
    SearchResponse,
)
from core.errors import AuthError, FetchError, PwfzError, SearchError

AUTH_HEADER = "Passwork-Auth"

EnvelopeT = TypeVar("EnvelopeT", bound=ApiEnvelope)


class PassworkClient:
    """Implementación httpx de `core.interfaces.collaborators.VaultClient`."""

    def __init__(
        self,
        settings: AppSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._client = build_client(settings, transport=transport)

    def __enter__(self) -> "PassworkClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def login(self) -> str:
        api_key = self._settings.require_api_key()
        response = self._send(
            "POST",
            f"/auth/login/{quote(api_key, safe='')}",
            error_cls=AuthError,
            context="login failed",
        )
        parsed = self._parse(response, LoginResponse, AuthError, "login failed")
        if parsed.status != SUCCESS_STATUS or not parsed.data.token:
            raise AuthError(f"login failed: status={parsed.status or '<missing>'} token empty")
        return parsed.data.token

    def search(self, token: str, query: str) -> list[SearchHit]:
        response = self._send(
            "POST",
            "/passwords/search",
            error_cls=SearchError,
            context="search failed",
            token=token,
            json={"query": query},
        )
        parsed = self._parse(response, SearchResponse, SearchError, "search failed")
        parsed.ensure_success(SearchError, "search failed")
        return parsed.data

    def get_password(self, token: str, password_id: str) -> PasswordDetail:
        context = f"get password {password_id} failed"
        response = self._send(
            "GET",
            f"/passwords/{quote(password_id, safe='')}",
            error_cls=FetchError,
            context=context,
            token=token,
        )
        parsed = self._parse(response, PasswordResponse, FetchError, context)
        parsed.ensure_success(FetchError, context)
        if parsed.data is None:
            raise FetchError(f"{context}: empty data")
        return parsed.data

    def _send(
        self,
        method: str,
        path: str,
        *,
        error_cls: type[PwfzError],
        context: str,
        token: str | None = None,
        json: Any = None,
    ) -> httpx.Response:
        headers = {AUTH_HEADER: token} if token else None
        try:
            response = self._client.request(method, path, headers=headers, json=json)
        except httpx.TimeoutException as exc:
            raise error_cls(f"{context}: timeout after {self._settings.http_timeout_seconds:g}s") from exc
        except httpx.HTTPError as exc:
            raise error_cls(f"{context}: {type(exc).__name__}: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            raise error_cls(
                f"{context}: status={response.status_code} body={body_excerpt(response)}"
            )
        return response

    @staticmethod
    def _parse(
        response: httpx.Response,
        model: type[EnvelopeT],
        error_cls: type[PwfzError],
        context: str,
    ) -> EnvelopeT:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise error_cls(f"{context}: unexpected response ({exc.error_count()} errors)") from exc
