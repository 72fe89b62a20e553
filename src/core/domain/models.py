"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Cada endpoint de Passwork tiene su esquema explícito; nada de dicts sueltos.
- La validación en el borde da un único camino de error cuando el sobre
  (`status`/`data`) no es el esperado.

Nota:
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.errors import PwfzError

SUCCESS_STATUS = "success"


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


def _none_to_empty_str(value: Any) -> Any:
    return "" if value is None else value


def _none_to_empty_list(value: Any) -> Any:
    return [] if value is None else value


class PathSegment(_ApiModel):
    """Un nivel de la ruta (vault/carpeta) donde vive la contraseña."""

    order: int = Field(default=0, description="Posición del segmento en la ruta.")
    name: str = Field(default="", description="Nombre visible del segmento.")
    type: str = Field(default="", description="Tipo de nodo (vault, folder...).")
    id: str = Field(default="", description="Id del nodo.")

    _coerce = field_validator("name", "type", "id", mode="before")(_none_to_empty_str)


class CustomField(_ApiModel):
    """Campo adicional; `name` y `value` llegan codificados en base64."""

    name: str = Field(default="")
    value: str = Field(default="")
    type: str = Field(default="")

    _coerce = field_validator("name", "value", "type", mode="before")(_none_to_empty_str)


class AttachmentInfo(_ApiModel):
    name: str = Field(default="")
    id: str = Field(default="")
    encrypted_key: str = Field(default="", alias="encryptedKey")

    _coerce = field_validator("name", "id", "encrypted_key", mode="before")(_none_to_empty_str)


class SearchHit(_ApiModel):
    """Coincidencia mínima de `/passwords/search`."""

    id: str = Field(default="")
    name: str = Field(default="")

    _coerce = field_validator("id", "name", mode="before")(_none_to_empty_str)


class PasswordDetail(_ApiModel):
    """Registro completo de `/passwords/{id}`."""

    vault_id: str = Field(default="", alias="vaultId")
    id: str = Field(default="")
    name: str = Field(default="")
    login: str = Field(default="")
    url: str = Field(default="")
    crypted_password: str = Field(
        default="",
        alias="cryptedPassword",
        repr=False,
        description="Secreto codificado en base64.",
    )
    tags: list[str] = Field(default_factory=list)
    color: int = Field(default=0)
    path: list[PathSegment] = Field(default_factory=list)
    custom: list[CustomField] = Field(default_factory=list)
    attachments: list[AttachmentInfo] = Field(default_factory=list)

    _coerce_str = field_validator(
        "vault_id", "id", "name", "login", "url", "crypted_password", mode="before"
    )(_none_to_empty_str)
    _coerce_list = field_validator("tags", "path", "custom", "attachments", mode="before")(
        _none_to_empty_list
    )

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value: Any) -> Any:
        if isinstance(value, list):
            return ["" if tag is None else tag for tag in value]
        return value

    @field_validator("color", mode="before")
    @classmethod
    def _color_default(cls, value: Any) -> Any:
        return 0 if value is None else value


class ApiEnvelope(_ApiModel):
    """Sobre común `{status, data}` de todas las respuestas."""

    status: str = Field(default="")

    _coerce = field_validator("status", mode="before")(_none_to_empty_str)

    def ensure_success(self, error_cls: type[PwfzError], context: str) -> None:
        if self.status != SUCCESS_STATUS:
            raise error_cls(f"{context}: status={self.status or '<missing>'}")


class LoginData(_ApiModel):
    token: str = Field(default="", repr=False)

    _coerce = field_validator("token", mode="before")(_none_to_empty_str)


class LoginResponse(ApiEnvelope):
    data: LoginData = Field(default_factory=LoginData)

    @field_validator("data", mode="before")
    @classmethod
    def _data_default(cls, value: Any) -> Any:
        return {} if value is None else value


class SearchResponse(ApiEnvelope):
    data: list[SearchHit] = Field(default_factory=list)

    _coerce_list = field_validator("data", mode="before")(_none_to_empty_list)


class PasswordResponse(ApiEnvelope):
    data: PasswordDetail | None = None
