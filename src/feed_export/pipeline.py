from __future__ import annotations

import argparse
import datetime

from .classify import classify_transaction
from .errors import ExportError, RecordError
from .feeds.venmo import VenmoFeedClient
from .logging_setup import configure_logging, get_logger
from .models import ExportSummary, StopReason
from .output import CsvRowSink, utf8_stdout
from .pages import PageFetcher, iter_pages
from .parse import DateParseFailure, parse_timestamp
from .policy import is_before_cutoff, parse_cutoff

logger = get_logger(__name__)


def run_export(
    fetcher: PageFetcher,
    sink: CsvRowSink,
    external_id: str,
    cutoff: datetime.datetime,
    credential: str,
) -> ExportSummary:
    """
    Recorre el feed (más nuevo primero) y exporta una fila por transacción:
    - fecha ilegible o monto ilegible => se omite ese registro y se sigue
    - primera transacción anterior al corte => se corta todo (no se filtra)
    - página sin cursor => fin del feed
    Los ExportError (red, status, cuerpo, escritura) se propagan tal cual.
    """
    summary = ExportSummary()
    sink.write_header()

    for page in iter_pages(fetcher, external_id, credential):
        summary.pages_fetched += 1

        for story in page.stories:
            occurred_at = parse_timestamp(story.date)
            if isinstance(occurred_at, DateParseFailure):
                logger.warning("Se omite la transacción %s: %s", story.id or "?", occurred_at)
                summary.records_skipped += 1
                continue

            if is_before_cutoff(occurred_at, cutoff):
                logger.info("Se alcanzó la fecha de corte, deteniendo.")
                summary.stop_reason = StopReason.CUTOFF_REACHED
                summary.rows_written = sink.rows_written
                return summary

            try:
                row = classify_transaction(story)
            except RecordError as exc:
                logger.warning("Se omite la transacción %s: %s", story.id or "?", exc)
                summary.records_skipped += 1
                continue

            sink.write_row(row)

    summary.stop_reason = StopReason.FEED_EXHAUSTED
    summary.rows_written = sink.rows_written
    return summary


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Exporta el historial de transacciones del feed a CSV")
    parser.add_argument("external_id", help="External ID de la cuenta")
    parser.add_argument("cutoff", help="Fecha de corte YYYY-MM-DD (se detiene en la primera transacción anterior)")
    parser.add_argument("cookie", help="Cookie de sesión del navegador")
    args = parser.parse_args(argv)

    configure_logging()

    try:
        cutoff = parse_cutoff(args.cutoff)
        sink = CsvRowSink(utf8_stdout())
        with VenmoFeedClient() as client:
            summary = run_export(client, sink, args.external_id, cutoff, args.cookie)
    except ExportError as exc:
        raise SystemExit(f"Error: {exc}")

    logger.info(
        "Transacciones exportadas: %d (páginas: %d, omitidas: %d)",
        summary.rows_written,
        summary.pages_fetched,
        summary.records_skipped,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
