from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _FeedModel(BaseModel):
    """
    Base para los objetos que llegan del feed:
    - claves desconocidas se ignoran
    - null equivale a campo ausente (el feed los omite sin avisar)
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Note(_FeedModel):
    name: str = ""
    content: str = ""


class Party(_FeedModel):
    display_name: str = Field("", alias="displayName")
    username: str = ""

    def label(self) -> str:
        return self.display_name or self.username


class TitlePayload(_FeedModel):
    sub_type: str = Field("", alias="subType", description="standardTransfer o p2p")


class Title(_FeedModel):
    payload: TitlePayload = Field(default_factory=TitlePayload)
    receiver: Party = Field(default_factory=Party)
    sender: Party = Field(default_factory=Party)


class RawTransaction(_FeedModel):
    id: str = ""
    amount: str = Field("", description='Texto tal cual llega, p.ej. "+$12.34"')
    date: str = Field("", description="RFC3339, a veces sin zona horaria")
    type: str = ""
    note: Note = Field(default_factory=Note)
    title: Title = Field(default_factory=Title)


class Page(_FeedModel):
    next_cursor: str = Field("", alias="nextId")
    stories: List[RawTransaction] = Field(default_factory=list)

    @field_validator("stories", mode="before")
    @classmethod
    def _null_stories_as_empty(cls, value: Any) -> Any:
        # Una story null se decodifica vacía; sin fecha, el driver la omite
        if isinstance(value, list):
            return [{} if item is None else item for item in value]
        return value


class TransactionKind(str, Enum):
    TRANSFER = "Transfer"
    PAYMENT = "Payment"
    UNCLASSIFIED = ""


class ExportRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(..., description="Monto con signo de un Payment (negativo=enviado); 0 en Transfer y Unclassified")
    date: str
    kind: TransactionKind
    note: str = ""

    def as_csv_row(self) -> List[str]:
        return [f"{self.amount:.2f}", self.date, self.kind.value, self.note]


class StopReason(str, Enum):
    CUTOFF_REACHED = "cutoff_reached"
    FEED_EXHAUSTED = "feed_exhausted"


class ExportSummary(BaseModel):
    rows_written: int = 0
    pages_fetched: int = 0
    records_skipped: int = 0
    stop_reason: StopReason = StopReason.FEED_EXHAUSTED
