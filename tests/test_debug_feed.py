from __future__ import annotations

import pytest

from feed_export import debug_feed
from feed_export.errors import FetchError
from feed_export.models import Page


class _Client:
    def __init__(self, page=None, error=None) -> None:
        self.page = page
        self.error = error
        self.cursors = []

    def __call__(self):
        return self

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return None

    def fetch_page(self, external_id, cursor, credential):
        self.cursors.append(cursor)
        if self.error:
            raise self.error
        return self.page


def test_prints_parsed_and_skipped_stories(story, monkeypatch, capsys):
    page = Page(
        nextId="c9",
        stories=[
            story(id="ok", amount="-$5.00"),
            story(id="bad-date", date="ayer"),
            story(id="bad-amount", amount="$x"),
        ],
    )
    client = _Client(page=page)
    monkeypatch.setattr(debug_feed, "VenmoFeedClient", client)

    assert debug_feed.main(["ext", "cookie", "--cursor", "c8"]) == 0

    out = capsys.readouterr().out
    assert client.cursors == ["c8"]
    assert "stories=3 nextId='c9'" in out
    assert "'-5.00'" in out
    assert "FALLA" in out
    assert "OMITIDA" in out


def test_fetch_error_exits_non_zero(monkeypatch):
    monkeypatch.setattr(debug_feed, "VenmoFeedClient", _Client(error=FetchError("el feed respondió 401", 401)))

    with pytest.raises(SystemExit) as exc:
        debug_feed.main(["ext", "cookie"])
    assert "401" in str(exc.value.code)
