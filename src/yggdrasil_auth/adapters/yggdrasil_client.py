"""Cliente de sesión Yggdrasil (authserver de Mojang).

Responsabilidad:
- Serializar el request de cada operación con los nombres del contrato.
- Hacer un único POST y decodificar éxito o envelope de error según el status.
- Reemplazar la sesión en memoria tras un authenticate/refresh exitoso.

No reintenta, no refresca tokens por su cuenta y no es thread-safe: usar una
instancia por hilo.
"""

from __future__ import annotations

import logging
import uuid
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from yggdrasil_auth.adapters.http_client import build_client
from yggdrasil_auth.core.config import AppSettings
from yggdrasil_auth.core.domain.errors import LocalFailure, RemoteFailure
from yggdrasil_auth.core.domain.models import (
    AuthenticationRequest,
    AuthenticationResponse,
    ErrorPayload,
    InvalidateRequest,
    Profile,
    RefreshRequest,
    RefreshResponse,
    Session,
    SignoutRequest,
    User,
    ValidateRequest,
    WireModel,
)
from yggdrasil_auth.core.interfaces.auth_api import ValidationResult

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)
_WireT = TypeVar("_WireT", bound=WireModel)


def new_client_token() -> str:
    """Genera un client token nuevo (UUID4 sin guiones, como el launcher oficial)."""

    return uuid.uuid4().hex


class YggdrasilClient:
    """Cliente síncrono para `/authenticate`, `/refresh`, `/validate`, `/signout` e `/invalidate`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client_token: str | None = None,
        access_token: str = "",
        http_client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else build_client(self._settings, transport=transport)
        self._session = Session(
            access_token=access_token,
            client_token=client_token if client_token is not None else new_client_token(),
        )

    @property
    def session(self) -> Session:
        return self._session

    @property
    def access_token(self) -> str:
        return self._session.access_token

    @property
    def client_token(self) -> str:
        return self._session.client_token

    @property
    def selected_profile(self) -> Profile | None:
        return self._session.selected_profile

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "YggdrasilClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def authenticate(
        self,
        username: str,
        password: str,
        agent_name: str = "Minecraft",
        agent_version: int = 1,
    ) -> AuthenticationResponse:
        """Autentica con usuario/contraseña y guarda la sesión resultante."""

        request = self._build(
            "/authenticate",
            AuthenticationRequest,
            agent={"name": agent_name, "version": agent_version},
            username=username,
            password=password,
            client_token=self._session.client_token,
            request_user=True,
        )
        response = self._post("/authenticate", request)
        if response.status_code != 200:
            raise self._remote_failure(response)

        auth = self._decode(response, AuthenticationResponse)
        self._replace_session(auth.access_token, auth.client_token, auth.selected_profile, auth.user)
        return auth

    def refresh(self, selected_profile: Profile | None = None) -> RefreshResponse:
        """Canjea el par access/client token actual por un access token nuevo.

        `selected_profile` solo se envía si se indica (selección de perfil).
        """

        request = self._build(
            "/refresh",
            RefreshRequest,
            access_token=self._session.access_token,
            client_token=self._session.client_token,
            selected_profile=selected_profile,
            request_user=True,
        )
        response = self._post("/refresh", request)
        if response.status_code != 200:
            raise self._remote_failure(response)

        refreshed = self._decode(response, RefreshResponse)
        self._replace_session(
            refreshed.access_token,
            refreshed.client_token,
            refreshed.selected_profile,
            refreshed.user,
        )
        return refreshed

    def validate(self) -> ValidationResult:
        """Comprueba si el par de tokens actual sigue siendo válido.

        - 204: válido.
        - 403: inválido, con el error remoto adjunto.
        - otro status: inválido, sin error.

        Un 403 cuyo body no es un envelope de error legible levanta `LocalFailure`.
        """

        request = self._build(
            "/validate",
            ValidateRequest,
            access_token=self._session.access_token,
            client_token=self._session.client_token,
        )
        response = self._post("/validate", request)
        if response.status_code == 204:
            return ValidationResult(valid=True)
        if response.status_code == 403:
            return ValidationResult(valid=False, error=self._remote_failure(response))
        return ValidationResult(valid=False)

    def signout(self, username: str, password: str) -> None:
        """Invalida todos los access tokens de la cuenta usando sus credenciales."""

        request = self._build("/signout", SignoutRequest, username=username, password=password)
        response = self._post("/signout", request)
        if response.content:
            raise self._remote_failure(response)

    def invalidate(self) -> None:
        """Invalida el par access/client token actual."""

        request = self._build(
            "/invalidate",
            InvalidateRequest,
            access_token=self._session.access_token,
            client_token=self._session.client_token,
        )
        response = self._post("/invalidate", request)
        if response.content:
            raise self._remote_failure(response)

    def _build(self, path: str, model: type[_WireT], **fields: object) -> _WireT:
        try:
            return model(**fields)
        except ValidationError as exc:
            raise LocalFailure(f"could not build request for {path}", cause=exc) from exc

    def _post(self, path: str, request: WireModel) -> httpx.Response:
        try:
            body = request.model_dump_json(by_alias=True, exclude_none=True)
        except PydanticSerializationError as exc:
            raise LocalFailure(f"could not encode request for {path}", cause=exc) from exc

        try:
            response = self._http.post(path, content=body.encode("utf-8"))
        except httpx.HTTPError as exc:
            raise LocalFailure(f"request to {path} failed", cause=exc) from exc

        logger.debug("POST %s -> %s (%d bytes)", path, response.status_code, len(response.content))
        return response

    def _decode(self, response: httpx.Response, model: type[_ModelT]) -> _ModelT:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise LocalFailure(
                f"could not decode {model.__name__} from {response.request.url.path}",
                cause=exc,
            ) from exc

    def _remote_failure(self, response: httpx.Response) -> RemoteFailure:
        payload = self._decode(response, ErrorPayload)
        failure = RemoteFailure.from_payload(payload, response.status_code)
        logger.warning(
            "Yggdrasil %s returned %s: %s",
            response.request.url.path,
            response.status_code,
            failure.error or failure.error_message,
        )
        return failure

    def _replace_session(
        self,
        access_token: str,
        client_token: str,
        selected_profile: Profile | None,
        user: User | None,
    ) -> None:
        self._session = Session(
            access_token=access_token,
            client_token=client_token,
            selected_profile=selected_profile.model_copy(deep=True) if selected_profile is not None else None,
            user=user.model_copy(deep=True) if user is not None else None,
        )
        logger.info(
            "Session updated for profile %s",
            selected_profile.name if selected_profile is not None else "<none>",
        )
