from __future__ import annotations

import csv
import sys
from typing import IO, Sequence

from .errors import ExportWriteError
from .models import ExportRow

# Las dos últimas etiquetas no coinciden con lo que se escribe (tipo y nota);
# se conservan porque los consumidores del CSV ya dependen de ellas.
CSV_HEADER: Sequence[str] = ("Amount", "Date", "Note Name", "Note Date")


def utf8_stdout() -> IO[str]:
    """
    stdout en UTF-8 y sin traducir saltos de línea, sea cual sea el locale.
    """
    stream = sys.stdout
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8", newline="")
    return stream


class CsvRowSink:
    """
    Escribe el CSV de exportación sobre un stream de texto.
    Cada fila se vacía (flush) en cuanto se escribe: si la corrida muere
    después, lo ya exportado queda en la salida.
    """

    def __init__(self, stream: IO[str], header: Sequence[str] = CSV_HEADER) -> None:
        self._stream = stream
        self._writer = csv.writer(stream, lineterminator="\n")
        self._header = list(header)
        self._header_written = False
        self.rows_written = 0

    def _write(self, values: Sequence[str]) -> None:
        try:
            self._writer.writerow(values)
            self._stream.flush()
        except (OSError, UnicodeError, csv.Error) as exc:
            raise ExportWriteError(f"no se pudo escribir el CSV: {exc}") from exc

    def write_header(self) -> None:
        if self._header_written:
            return
        self._write(self._header)
        self._header_written = True

    def write_row(self, row: ExportRow) -> None:
        self.write_header()
        self._write(row.as_csv_row())
        self.rows_written += 1
