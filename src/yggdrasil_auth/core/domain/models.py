"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta del payload que devuelve Yggdrasil sin acoplar
  el Core a librerías de I/O.
- Los alias reproducen exactamente los nombres del contrato JSON (camelCase),
  mientras el código Python usa snake_case.

Nota:
- Estos modelos describen *qué* viaja por el cable, no *cómo* se envía.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class WireModel(BaseModel):
    """Base común: acepta alias o nombre de campo e ignora claves desconocidas."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Agent(WireModel):
    """Juego para el que se autentica."""

    name: str = Field(
        default="Minecraft",
        description="Nombre del juego (agent).",
    )
    version: int = Field(
        default=1,
        description="Versión del agent.",
    )


class Profile(WireModel):
    """Identidad de juego asociada a una cuenta."""

    id: str = Field(
        default="",
        description="UUID del perfil (sin guiones).",
    )
    name: str = Field(
        default="",
        description="Nombre visible del perfil.",
    )
    legacy: bool = Field(
        default=False,
        description="True si el perfil todavía no migró a cuenta Mojang.",
    )


class Property(WireModel):
    name: str = Field(default="")
    value: str = Field(default="")


class User(WireModel):
    """Usuario autenticado (cuenta, no perfil)."""

    id: str = Field(
        default="",
        description="Identificador de la cuenta.",
    )
    properties: list[Property] = Field(
        default_factory=list,
        description="Propiedades de la cuenta, en el orden recibido.",
    )


class Session(BaseModel):
    """Estado en memoria del cliente.

    Por qué inmutable:
    - Se reemplaza completo tras un decode exitoso; nunca hay mezcla de campos
      viejos y nuevos.
    """

    model_config = ConfigDict(frozen=True)

    access_token: str = ""
    client_token: str = ""
    selected_profile: Profile | None = None
    user: User | None = None


class AuthenticationRequest(WireModel):
    agent: Agent = Field(default_factory=Agent)
    username: str
    password: str
    client_token: str = Field(default="", alias="clientToken")
    request_user: bool = Field(default=True, alias="requestUser")


class AuthenticationResponse(WireModel):
    access_token: str = Field(..., alias="accessToken")
    client_token: str = Field(..., alias="clientToken")
    available_profiles: list[Profile] = Field(
        default_factory=list,
        alias="availableProfiles",
        description="Perfiles disponibles para la cuenta.",
    )
    selected_profile: Profile | None = Field(default=None, alias="selectedProfile")
    user: User | None = None


class RefreshRequest(WireModel):
    access_token: str = Field(..., alias="accessToken")
    client_token: str = Field(..., alias="clientToken")
    selected_profile: Profile | None = Field(
        default=None,
        alias="selectedProfile",
        description="Perfil a seleccionar; se omite del body si no se indica.",
    )
    request_user: bool = Field(default=True, alias="requestUser")


class RefreshResponse(WireModel):
    access_token: str = Field(..., alias="accessToken")
    client_token: str = Field(..., alias="clientToken")
    selected_profile: Profile | None = Field(default=None, alias="selectedProfile")
    user: User | None = None


class ValidateRequest(WireModel):
    access_token: str = Field(..., alias="accessToken")
    client_token: str = Field(..., alias="clientToken")


class SignoutRequest(WireModel):
    username: str
    password: str


class InvalidateRequest(WireModel):
    access_token: str = Field(..., alias="accessToken")
    client_token: str = Field(..., alias="clientToken")


class ErrorPayload(WireModel):
    """Envelope de error de Yggdrasil (`{"error", "errorMessage", "cause"}`)."""

    error: str = Field(default="")
    error_message: str = Field(default="", alias="errorMessage")
    cause: str = Field(default="")

    @field_validator("error", "error_message", "cause", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return "" if value is None else value
