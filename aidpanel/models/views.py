"""Canonical view models derived from the raw source records.

These shapes are recomputed on every fetch or filter change and are never
persisted or mutated in place.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from aidpanel.models.enums import CalendarEventType, Currency, LedgerKind, MapLayer


class CalendarEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    date: date
    type: CalendarEventType
    link: str
    details: str = ""


class CalendarCell(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1, le=31)
    is_today: bool = False
    events: tuple[CalendarEvent, ...] = ()


class CalendarMonth(BaseModel):
    """A render-ready month grid. ``month`` is zero-based (0 = January)."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(ge=0, le=11)
    leading_blanks: int = Field(ge=0, le=6)
    days_in_month: int
    cells: tuple[CalendarCell, ...]

    @property
    def total_cells(self) -> int:
        return self.leading_blanks + len(self.cells)

    @property
    def event_count(self) -> int:
        return sum(len(cell.events) for cell in self.cells)

    def events_on(self, day: int) -> tuple[CalendarEvent, ...]:
        if day < 1 or day > len(self.cells):
            return ()
        return self.cells[day - 1].events


class CashLedgerEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[LedgerKind.CASH] = LedgerKind.CASH
    id: str
    person_name: str
    description: str
    amount_display: str
    date: date
    amount: Decimal
    currency: Currency


class InKindLedgerEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[LedgerKind.IN_KIND] = LedgerKind.IN_KIND
    id: str
    person_name: str
    description: str
    amount_display: str
    date: date
    quantity: Decimal
    unit: str


LedgerEntry = Annotated[CashLedgerEntry | InKindLedgerEntry, Field(discriminator="kind")]


class MapPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    latitude: float
    longitude: float
    layer: MapLayer
    label: str
