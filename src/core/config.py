"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Se construye una sola vez al arrancar y se pasa explícitamente a cada
  componente: adaptadores y servicios no leen `os.environ` por su cuenta.

No hay fichero de configuración: todo sale del entorno del proceso.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ConfigError

APP_VERSION = "0.1.0"
DEFAULT_FZF_BIN = "fzf"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    base_url: str = Field(
        default="",
        validation_alias="PASSWORK_BASE_URL",
        description="Raíz de la API de Passwork (sin barra final).",
    )
    api_key: str = Field(
        default="",
        repr=False,
        validation_alias="PASSWORK_API_KEY",
        description="API key que se canjea por un token de sesión.",
    )
    fzf_bin: str = Field(
        default=DEFAULT_FZF_BIN,
        min_length=1,
        validation_alias="FZF_BIN",
        description="Ejecutable del selector difuso.",
    )
    clip_bin: str | None = Field(
        default=None,
        validation_alias="CLIP_BIN",
        description="Comando de portapapeles; si falta se autodetecta.",
    )
    http_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        validation_alias="PASSWORK_HTTP_TIMEOUT",
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=f"pwfz/{APP_VERSION}",
        min_length=1,
        validation_alias="PASSWORK_USER_AGENT",
        description="User-Agent para la API.",
    )

    @field_validator("base_url", "api_key", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("fzf_bin", mode="before")
    @classmethod
    def _default_fzf(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_FZF_BIN
        return value

    @field_validator("clip_bin", mode="before")
    @classmethod
    def _blank_clip_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def require_base_url(self) -> str:
        if not self.base_url:
            raise ConfigError("PASSWORK_BASE_URL environment variable is not set")
        return self.base_url

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigError("PASSWORK_API_KEY is not set")
        return self.api_key


def load_settings() -> AppSettings:
    """Lee el entorno una vez; cualquier valor inválido es un `ConfigError`."""

    try:
        return AppSettings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigError(f"invalid environment: {problems}") from exc
