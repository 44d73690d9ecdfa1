from __future__ import annotations

from typing import Optional


class ExportError(Exception):
    """Error fatal: aborta toda la exportación."""


class InvalidCutoffError(ExportError):
    pass


class ConfigError(ExportError):
    pass


class FetchError(ExportError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PageDecodeError(ExportError):
    pass


class ExportWriteError(ExportError):
    pass


class RecordError(Exception):
    """Error recuperable: se omite una sola transacción y se sigue."""


class AmountParseError(RecordError):
    pass
