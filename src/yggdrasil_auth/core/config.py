"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar el cliente.
- Permite que adaptadores (HTTP/logging) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias).

    Objetivo: permitir que un launcher instalado lea su config sin tocar el proyecto.
    """

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "yggdrasil-auth"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "yggdrasil-auth"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "yggdrasil-auth"
    return Path.home() / ".config" / "yggdrasil-auth"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el cliente con lógica.
    - Un único contrato de configuración para transporte y logging.
    """

    model_config = SettingsConfigDict(
        env_prefix="YGGDRASIL_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    auth_server_url: str = Field(
        default="https://authserver.mojang.com",
        min_length=8,
        description="Base URL del servidor Yggdrasil.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="yggdrasil-auth/0.1 (+https://github.com/yggdrasil-auth/yggdrasil-auth)",
        min_length=1,
        description="User-Agent enviado en cada petición (identificador del cliente).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging para el logger `yggdrasil_auth`.",
    )

    @field_validator("auth_server_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level
