"""Contrato del cliente de autenticación.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que un launcher reciba cualquier implementación (HTTP real, fake
  en memoria) sin acoplarse al adaptador concreto.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from yggdrasil_auth.core.domain.errors import RemoteFailure
from yggdrasil_auth.core.domain.models import (
    AuthenticationResponse,
    Profile,
    RefreshResponse,
    Session,
)


@dataclass(frozen=True)
class ValidationResult:
    """Resultado de `/validate`.

    `error` solo está presente cuando el servidor respondió 403 con un envelope
    de error legible.
    """

    valid: bool
    error: RemoteFailure | None = None

    def __bool__(self) -> bool:
        return self.valid


@runtime_checkable
class AuthSessionAPI(Protocol):
    """Contrato mínimo de un cliente de sesión Yggdrasil.

    Reglas de diseño:
    - Las operaciones son síncronas: una petición, una respuesta.
    - Los fallos se levantan como `YggdrasilError`; solo `validate` devuelve
      el error remoto como valor.
    """

    @property
    def session(self) -> Session: ...

    def authenticate(
        self,
        username: str,
        password: str,
        agent_name: str = "Minecraft",
        agent_version: int = 1,
    ) -> AuthenticationResponse: ...

    def refresh(self, selected_profile: Profile | None = None) -> RefreshResponse: ...

    def validate(self) -> ValidationResult: ...

    def signout(self, username: str, password: str) -> None: ...

    def invalidate(self) -> None: ...
