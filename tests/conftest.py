from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from feed_export.errors import FetchError
from feed_export.models import Page, RawTransaction


def _story(
    date: str = "2024-10-04T13:28:52Z",
    type: str = "payment",
    amount: str = "-$5.00",
    sender: Optional[Dict[str, str]] = None,
    receiver: Optional[Dict[str, str]] = None,
    note_name: str = "",
    note_content: str = "",
    id: str = "story-1",
) -> RawTransaction:
    """
    Arma una story con la misma forma JSON que devuelve el feed.
    """
    payload: Dict[str, Any] = {
        "id": id,
        "amount": amount,
        "date": date,
        "type": type,
        "note": {"name": note_name, "content": note_content},
        "title": {
            "payload": {"subType": "p2p"},
            "sender": sender or {"displayName": "you", "username": "me"},
            "receiver": receiver or {"displayName": "Jane Doe", "username": "janedoe"},
        },
    }
    return RawTransaction.model_validate(payload)


class FakeFetcher:
    """
    Fetcher en memoria: pages[cursor] -> Page.
    Guarda los cursores pedidos para verificar el orden de paginación.
    """

    def __init__(self, pages: Dict[str, Page], fail_on: Optional[str] = None, status_code: int = 401) -> None:
        self.pages = pages
        self.fail_on = fail_on
        self.status_code = status_code
        self.calls: List[tuple] = []

    def fetch_page(self, external_id: str, cursor: str, credential: str) -> Page:
        self.calls.append((external_id, cursor, credential))
        if self.fail_on is not None and cursor == self.fail_on:
            raise FetchError(f"el feed respondió {self.status_code}", status_code=self.status_code)
        return self.pages[cursor]


@pytest.fixture
def story():
    return _story


@pytest.fixture
def fake_fetcher():
    return FakeFetcher
