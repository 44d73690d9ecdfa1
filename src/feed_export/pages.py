from __future__ import annotations

from typing import Iterator, Protocol

from .logging_setup import get_logger
from .models import Page
from .policy import has_more_pages

logger = get_logger(__name__)


class PageFetcher(Protocol):
    def fetch_page(self, external_id: str, cursor: str, credential: str) -> Page:
        """
        Una página del feed. cursor vacío => primera página.
        Errores de red, status o cuerpo ilegible => ExportError (fatal).
        """
        ...


def iter_pages(fetcher: PageFetcher, external_id: str, credential: str) -> Iterator[Page]:
    """
    Recorre el feed página a página, en orden de cursor.
    - Pide la siguiente página solo cuando el consumidor la necesita
    - Termina después de la página que no trae cursor
    Si el consumidor corta la iteración no se hacen más requests.
    """
    cursor = ""
    while True:
        logger.debug("Pidiendo página (cursor=%r)", cursor)
        page = fetcher.fetch_page(external_id, cursor, credential)
        yield page

        if not has_more_pages(page):
            logger.info("No hay más transacciones en el feed.")
            return
        cursor = page.next_cursor
