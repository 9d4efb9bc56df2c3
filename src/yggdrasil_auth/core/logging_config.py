"""Logging del paquete.

El paquete solo emite a través de `logging.getLogger(__name__)`; esta función
es opcional para quien use el cliente sin configurar logging propio.
"""

from __future__ import annotations

import logging
import sys

from yggdrasil_auth.core.config import AppSettings

PACKAGE_LOGGER = "yggdrasil_auth"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int | None = None, settings: AppSettings | None = None) -> logging.Logger:
    """Configura un `StreamHandler` en el logger `yggdrasil_auth`.

    Idempotente: llamarla varias veces solo actualiza el nivel.
    """

    if level is None:
        level = (settings or AppSettings()).log_level

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not any(getattr(h, "_yggdrasil_auth", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._yggdrasil_auth = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
