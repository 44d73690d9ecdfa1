from __future__ import annotations

import datetime
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Tuple, Union

from .errors import AmountParseError


# Primero con zona horaria (RFC3339: "Z" o "+HH:MM"), luego sin ella.
TIMESTAMP_FORMATS: Tuple[str, ...] = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
)

# Zona de referencia para fechas sin offset; la misma que usa la fecha de corte.
REFERENCE_TZ = datetime.timezone.utc

_AMOUNT_NOISE = ("$", ",", "+", "-")


@dataclass(frozen=True)
class DateParseFailure:
    raw: str
    formats: Tuple[str, ...] = TIMESTAMP_FORMATS

    def __str__(self) -> str:
        return f"fecha no reconocida {self.raw!r} (formatos probados: {', '.join(self.formats)})"


def _try_format(raw: str, fmt: str) -> datetime.datetime | None:
    try:
        return datetime.datetime.strptime(raw, fmt)
    except ValueError:
        return None


def parse_timestamp(raw: str) -> Union[datetime.datetime, DateParseFailure]:
    """
    Prueba los formatos en orden y devuelve el primero que funcione.
    Si la fecha no trae zona horaria se interpreta en REFERENCE_TZ.
    """
    for fmt in TIMESTAMP_FORMATS:
        dt = _try_format(raw or "", fmt)
        if dt is None:
            continue
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=REFERENCE_TZ)
        return dt
    return DateParseFailure(raw=raw)


def parse_amount(raw: str) -> Decimal:
    """
    Convierte montos tipo "-$1,234.56" / "+ $20.00" a Decimal con signo.
    El signo sale de la presencia de '-' en el texto original.
    """
    s = raw or ""
    for ch in _AMOUNT_NOISE:
        s = s.replace(ch, "")
    s = s.strip()

    try:
        value = Decimal(s)
    except InvalidOperation:
        raise AmountParseError(f"monto no reconocido: {raw!r}") from None

    # Decimal acepta "NaN" / "Infinity"; no son montos
    if not value.is_finite():
        raise AmountParseError(f"monto no reconocido: {raw!r}")

    if "-" in (raw or ""):
        value = -value
    return value
