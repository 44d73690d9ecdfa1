"""
Configuración de la exportación.
Valores por defecto sobreescribibles con variables de entorno FEED_EXPORT_*.
"""

import os

from .errors import ConfigError


class Config:
    """Configuración leída del entorno al importar el módulo."""

    # Feed
    API_URL: str = os.getenv("FEED_EXPORT_API_URL", "https://account.venmo.com/api/stories")
    REFERER: str = os.getenv("FEED_EXPORT_REFERER", "https://account.venmo.com/")
    USER_AGENT: str = os.getenv("FEED_EXPORT_USER_AGENT", "Mozilla/5.0")
    # Texto crudo: se valida al usarlo, para que un valor roto sea un error de la corrida
    REQUEST_TIMEOUT: str = os.getenv("FEED_EXPORT_TIMEOUT", "30")

    # Logging
    LOG_LEVEL: str = os.getenv("FEED_EXPORT_LOG_LEVEL", "INFO")

    def request_timeout(self) -> float:
        try:
            value = float(self.REQUEST_TIMEOUT)
        except (TypeError, ValueError):
            raise ConfigError(f"FEED_EXPORT_TIMEOUT inválido: {self.REQUEST_TIMEOUT!r}") from None
        if value <= 0:
            raise ConfigError(f"FEED_EXPORT_TIMEOUT debe ser positivo: {self.REQUEST_TIMEOUT!r}")
        return value


config = Config()
