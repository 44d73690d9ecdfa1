from __future__ import annotations

import argparse

from .classify import classify_transaction
from .errors import ExportError, RecordError
from .feeds.venmo import VenmoFeedClient
from .parse import DateParseFailure, parse_timestamp


def main(argv=None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("external_id", help="External ID de la cuenta")
    ap.add_argument("cookie", help="Cookie de sesión")
    ap.add_argument("--cursor", default="", help="nextId de la página a inspeccionar (vacío = primera)")
    ap.add_argument("--limit", type=int, default=50, help="máximo de stories a mostrar")
    args = ap.parse_args(argv)

    try:
        with VenmoFeedClient() as client:
            page = client.fetch_page(args.external_id, args.cursor, args.cookie)
    except ExportError as exc:
        raise SystemExit(f"Error: {exc}")

    print(f"stories={len(page.stories)} nextId={page.next_cursor!r}")

    for i, story in enumerate(page.stories[: args.limit], start=1):
        print(f"\n{i:03d}: id={story.id} type={story.type!r} amount={story.amount!r} subType={story.title.payload.sub_type!r}")

        parsed = parse_timestamp(story.date)
        if isinstance(parsed, DateParseFailure):
            print(f"     date={story.date!r} -> FALLA: {parsed}")
            continue
        print(f"     date={story.date!r} -> {parsed.isoformat()}")

        try:
            row = classify_transaction(story)
        except RecordError as exc:
            print(f"     fila -> OMITIDA: {exc}")
            continue
        print(f"     fila -> {row.as_csv_row()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
