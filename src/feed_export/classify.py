from __future__ import annotations

from decimal import Decimal

from .models import ExportRow, RawTransaction, TransactionKind
from .parse import parse_amount


# El feed marca como "you" al usuario dueño de la cuenta
SELF_DISPLAY_NAME = "you"


def _transfer_row(tx: RawTransaction) -> ExportRow:
    # El monto de una transferencia va en la nota, no en la columna Amount
    return ExportRow(
        amount=Decimal("0"),
        date=tx.date,
        kind=TransactionKind.TRANSFER,
        note=f"Transfer {tx.note.name} | {tx.amount}",
    )


def _payment_row(tx: RawTransaction) -> ExportRow:
    amount = parse_amount(tx.amount)

    if tx.title.sender.display_name == SELF_DISPLAY_NAME:
        note = f"To {tx.title.receiver.label()} | {tx.note.content}"
    else:
        note = f"From {tx.title.sender.label()} | {tx.note.content}"

    return ExportRow(amount=amount, date=tx.date, kind=TransactionKind.PAYMENT, note=note)


def classify_transaction(tx: RawTransaction) -> ExportRow:
    """
    Normaliza una story del feed a una fila de exportación:
    - "transfer" (sin distinguir mayúsculas) => Transfer, monto 0
    - "payment" exacto => Payment, monto con signo y contraparte en la nota
    - cualquier otro tipo => fila vacía (Unclassified), nunca error

    Lanza AmountParseError si un Payment trae un monto ilegible.
    """
    if "transfer" in tx.type.lower():
        return _transfer_row(tx)
    if tx.type == "payment":
        return _payment_row(tx)
    return ExportRow(amount=Decimal("0"), date=tx.date, kind=TransactionKind.UNCLASSIFIED, note="")
