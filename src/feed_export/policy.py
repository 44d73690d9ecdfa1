from __future__ import annotations

import datetime

from .errors import InvalidCutoffError
from .models import Page
from .parse import REFERENCE_TZ


CUTOFF_FORMAT = "%Y-%m-%d"


def parse_cutoff(value: str) -> datetime.datetime:
    """
    Fecha de corte YYYY-MM-DD => inicio del día en la zona de referencia.
    """
    try:
        day = datetime.datetime.strptime(value, CUTOFF_FORMAT)
    except (TypeError, ValueError) as exc:
        raise InvalidCutoffError(f"fecha de corte inválida {value!r}, se espera YYYY-MM-DD") from exc
    return day.replace(tzinfo=REFERENCE_TZ)


def is_before_cutoff(occurred_at: datetime.datetime, cutoff: datetime.datetime) -> bool:
    # Estricto: una transacción justo en el corte se exporta
    return occurred_at < cutoff


def has_more_pages(page: Page) -> bool:
    return page.next_cursor != ""
