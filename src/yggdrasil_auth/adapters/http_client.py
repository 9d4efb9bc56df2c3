"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, timeouts y headers (User-Agent descriptivo) para todas
  las operaciones.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from yggdrasil_auth.core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults para Yggdrasil.

    Por qué un builder:
    - Centraliza timeouts/headers para que las cinco operaciones se comporten igual.
    - El `transport` opcional permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.auth_server_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )
