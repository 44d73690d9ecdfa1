"""
Logging centralizado del paquete ``feed_export``.

- ``configure_logging(...)``: un único RichHandler sobre stderr en el logger
  raíz del paquete. Lo llama la CLI una sola vez al arrancar.
- ``get_logger(name)``: loggers hijos; con NullHandler si nadie configuró nada.

stdout queda reservado para el CSV: ningún mensaje de diagnóstico va ahí.
"""

from __future__ import annotations

import logging
from typing import IO, Optional, Union

from rich.console import Console
from rich.logging import RichHandler

from .config import config

_PKG_LOGGER_NAME = "feed_export"
_CONFIGURED = False


def _parse_level(level: Union[int, str, None]) -> int:
    if isinstance(level, int):
        return level
    name = (level or config.LOG_LEVEL).strip().upper()
    if name.isdigit():
        return int(name)
    numeric = getattr(logging, name, None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO


def configure_logging(level: Union[int, str, None] = None, *, stream: Optional[IO[str]] = None) -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    console = Console(file=stream) if stream is not None else Console(stderr=True)
    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.setLevel(_parse_level(level))
    logger.addHandler(handler)
    logger.propagate = False

    # urllib3 (debajo de requests) es ruidoso en DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
