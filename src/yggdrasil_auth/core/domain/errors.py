"""Errores del cliente Yggdrasil.

Por qué dos clases:
- `LocalFailure`: falló algo de nuestro lado (serializar, red, decodificar).
  Conviene reintentar más tarde o revisar la conectividad.
- `RemoteFailure`: el servidor respondió con un envelope de error
  (credenciales inválidas, token expirado, etc.).

Ambas heredan de `YggdrasilError` para poder capturarlas juntas.
"""

from __future__ import annotations

from yggdrasil_auth.core.domain.models import ErrorPayload


class YggdrasilError(Exception):
    """Base de todos los errores del paquete."""

    status_code: int | None = None


class LocalFailure(YggdrasilError):
    """Fallo local: request no serializable, error de transporte o respuesta ilegible."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        base = super().__str__()
        if self.cause is not None:
            return f"{base}: {self.cause}"
        return base


class RemoteFailure(YggdrasilError):
    """Error reportado por Yggdrasil, con el status HTTP que lo produjo."""

    def __init__(self, error: str, error_message: str, cause: str, status_code: int) -> None:
        super().__init__(error_message or error or f"HTTP {status_code}")
        self.error = error
        self.error_message = error_message
        self.cause = cause
        self.status_code = status_code

    @classmethod
    def from_payload(cls, payload: ErrorPayload, status_code: int) -> "RemoteFailure":
        return cls(
            error=payload.error,
            error_message=payload.error_message,
            cause=payload.cause,
            status_code=status_code,
        )

    def __repr__(self) -> str:
        return (
            f"RemoteFailure(error={self.error!r}, error_message={self.error_message!r}, "
            f"cause={self.cause!r}, status_code={self.status_code})"
        )
