from __future__ import annotations

from typing import Dict, Optional

import requests
from pydantic import ValidationError

from ..config import config
from ..errors import FetchError, PageDecodeError
from ..logging_setup import get_logger
from ..models import Page

logger = get_logger(__name__)


def _browser_headers(cookie: str) -> Dict[str, str]:
    # El endpoint solo responde a peticiones con pinta de navegador
    return {
        "accept": "*/*",
        "accept-language": "en-US,en;q=0.9",
        "cookie": cookie,
        "dnt": "1",
        "referer": config.REFERER,
        "sec-ch-ua": '"Chromium";v="129", "Not=A?Brand";v="8"',
        "sec-ch-ua-mobile": "?0",
        "sec-ch-ua-platform": '"macOS"',
        "user-agent": config.USER_AGENT,
    }


class VenmoFeedClient:
    """
    Cliente del feed de stories de Venmo ("feedType=me").
    Un GET por página, sin reintentos: cualquier fallo es fatal.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.timeout = config.request_timeout() if timeout is None else timeout
        self.api_url = api_url or config.API_URL
        self.session = session or requests.Session()

    def __enter__(self) -> "VenmoFeedClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def fetch_page(self, external_id: str, cursor: str, credential: str) -> Page:
        params = {"feedType": "me", "externalId": external_id}
        if cursor:
            params["nextId"] = cursor

        try:
            resp = self.session.get(
                self.api_url,
                params=params,
                headers=_browser_headers(credential),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise FetchError(f"falló la petición al feed: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            raise FetchError(
                f"el feed respondió {resp.status_code} {resp.reason or ''}".rstrip(),
                status_code=resp.status_code,
            )

        try:
            page = Page.model_validate_json(resp.content)
        except ValidationError as exc:
            raise PageDecodeError(f"respuesta del feed ilegible: {exc}") from exc

        logger.debug("Página recibida: %d stories, nextId=%r", len(page.stories), page.next_cursor)
        return page
