from __future__ import annotations

from feed_export.models import Page
from feed_export.pages import iter_pages


def _page(next_id: str) -> Page:
    return Page.model_validate({"nextId": next_id, "stories": []})


def test_cursor_is_threaded_between_fetches(fake_fetcher):
    fetcher = fake_fetcher({"": _page("c2"), "c2": _page("c3"), "c3": _page("")})

    pages = list(iter_pages(fetcher, "ext", "cookie"))

    assert len(pages) == 3
    assert [c[1] for c in fetcher.calls] == ["", "c2", "c3"]
    assert all(c[0] == "ext" and c[2] == "cookie" for c in fetcher.calls)


def test_pages_are_fetched_lazily(fake_fetcher):
    fetcher = fake_fetcher({"": _page("c2"), "c2": _page("")})

    it = iter_pages(fetcher, "ext", "cookie")
    next(it)
    assert len(fetcher.calls) == 1

    it.close()
    assert len(fetcher.calls) == 1
