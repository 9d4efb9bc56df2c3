"""Cliente para la API de autenticación Yggdrasil de Mojang.

Uso típico:

    with YggdrasilClient() as client:
        client.authenticate("user@example.com", "secret")
        if not client.validate():
            client.refresh()
"""

from yggdrasil_auth.adapters.yggdrasil_client import YggdrasilClient, new_client_token
from yggdrasil_auth.core.config import AppSettings
from yggdrasil_auth.core.domain.errors import LocalFailure, RemoteFailure, YggdrasilError
from yggdrasil_auth.core.domain.models import Agent, Profile, Property, Session, User
from yggdrasil_auth.core.interfaces.auth_api import AuthSessionAPI, ValidationResult
from yggdrasil_auth.core.logging_config import setup_logging

__all__ = [
	"Agent",
	"AppSettings",
	"AuthSessionAPI",
	"LocalFailure",
	"Profile",
	"Property",
	"RemoteFailure",
	"Session",
	"User",
	"ValidationResult",
	"YggdrasilClient",
	"YggdrasilError",
	"new_client_token",
	"setup_logging",
]
