"""Calendar projection: month grid with events bucketed by day."""

from collections.abc import Iterable
from datetime import date, timedelta

from aidpanel.exceptions import CalendarGridError
from aidpanel.models.views import CalendarCell, CalendarEvent, CalendarMonth


class CalendarProjector:
    """Builds a Monday-first month grid and places calendar events in it."""

    def project(
        self,
        year: int,
        month: int,
        events: Iterable[CalendarEvent],
        today: date,
    ) -> CalendarMonth:
        """Project ``events`` onto the grid of ``month`` (zero-based) of ``year``.

        Args:
            year: Four-digit year.
            month: Zero-based month index, 0 = January.
            events: Normalized calendar events from every source.
            today: Reference date used for the ``is_today`` flag.

        Returns:
            CalendarMonth with leading blanks and one cell per day.
        """
        if not 0 <= month <= 11:
            raise ValueError(f"month must be in 0..11, got {month}")

        first_day = date(year, month + 1, 1)
        leading_blanks = first_day.weekday()  # Monday = 0
        days_in_month = self.days_in_month(year, month)
        by_day = self.group_by_day(year, month, events)

        cells = tuple(
            CalendarCell(
                day=day,
                is_today=(today.year, today.month - 1, today.day) == (year, month, day),
                events=tuple(by_day.get(day, ())),
            )
            for day in range(1, days_in_month + 1)
        )
        return CalendarMonth(
            year=year,
            month=month,
            leading_blanks=leading_blanks,
            days_in_month=days_in_month,
            cells=cells,
        )

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        """Day count of a zero-based month: the day before day 1 of the next month."""
        next_year, next_month = (year + 1, 1) if month == 11 else (year, month + 2)
        days = (date(next_year, next_month, 1) - timedelta(days=1)).day
        if days <= 0:
            raise CalendarGridError(year, month, days)
        return days

    @staticmethod
    def group_by_day(
        year: int, month: int, events: Iterable[CalendarEvent]
    ) -> dict[int, list[CalendarEvent]]:
        """Bucket events of the target month by day, keeping input order within a day."""
        by_day: dict[int, list[CalendarEvent]] = {}
        for event in events:
            if event.date.year == year and event.date.month - 1 == month:
                by_day.setdefault(event.date.day, []).append(event)
        return by_day

    @staticmethod
    def shift(year: int, month: int, delta: int) -> tuple[int, int]:
        """Move ``delta`` months from (year, zero-based month), anchored on day 1."""
        index = year * 12 + month + delta
        return index // 12, index % 12

    @staticmethod
    def month_of(day: date) -> tuple[int, int]:
        """Return (year, zero-based month) of a date."""
        return day.year, day.month - 1
