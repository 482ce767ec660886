"""Tests for the month calendar projection."""

import calendar as stdlib_calendar
from datetime import date

import pytest

from aidpanel.engines.calendar_projector import CalendarProjector
from aidpanel.models.enums import CalendarEventType
from aidpanel.models.views import CalendarEvent
from aidpanel.normalization.calendar import CalendarNormalizer


def _item(item_id: str, day: date, kind: CalendarEventType = CalendarEventType.EVENT) -> CalendarEvent:
    return CalendarEvent(id=item_id, title=item_id, date=day, type=kind, link=f"/x/{item_id}")


@pytest.fixture
def projector() -> CalendarProjector:
    return CalendarProjector()


class TestGrid:
    @pytest.mark.parametrize(
        "year,month,expected",
        [(2024, 1, 29), (2023, 1, 28), (2024, 3, 30), (2024, 0, 31), (2024, 11, 31), (1900, 1, 28), (2000, 1, 29)],
    )
    def test_days_in_month(self, projector, year, month, expected):
        assert projector.days_in_month(year, month) == expected

    @pytest.mark.parametrize("year", [2023, 2024])
    def test_every_month_matches_the_calendar(self, projector, year):
        for month in range(12):
            grid = projector.project(year, month, [], today=date(2000, 1, 1))
            first_weekday, days = stdlib_calendar.monthrange(year, month + 1)
            assert grid.leading_blanks == first_weekday
            assert grid.days_in_month == days
            assert [c.day for c in grid.cells] == list(range(1, days + 1))
            assert grid.total_cells == first_weekday + days

    def test_monday_first_offsets(self, projector):
        assert projector.project(2024, 0, [], today=date(2024, 1, 1)).leading_blanks == 0
        assert projector.project(2024, 1, [], today=date(2024, 1, 1)).leading_blanks == 3
        assert projector.project(2024, 8, [], today=date(2024, 1, 1)).leading_blanks == 6

    def test_month_out_of_range(self, projector):
        with pytest.raises(ValueError):
            projector.project(2024, 12, [], today=date(2024, 1, 1))
        with pytest.raises(ValueError):
            projector.project(2024, -1, [], today=date(2024, 1, 1))


class TestToday:
    def test_exactly_one_today_cell_in_current_month(self, projector):
        grid = projector.project(2024, 4, [], today=date(2024, 5, 17))
        flagged = [c.day for c in grid.cells if c.is_today]
        assert flagged == [17]

    def test_no_today_cell_in_other_months(self, projector):
        grid = projector.project(2024, 5, [], today=date(2024, 5, 17))
        assert not any(c.is_today for c in grid.cells)

    def test_same_month_other_year(self, projector):
        grid = projector.project(2023, 4, [], today=date(2024, 5, 17))
        assert not any(c.is_today for c in grid.cells)


class TestEventPlacement:
    def test_may_2024_example(self, projector, sample_event, sample_project, sample_case):
        items = CalendarNormalizer().normalize([sample_event], [sample_project], [sample_case])
        grid = projector.project(2024, 4, items, today=date(2024, 5, 1))

        assert grid.leading_blanks == 2
        assert [e.id for e in grid.events_on(25)] == ["event-1", "task-7-1"]
        assert [e.id for e in grid.events_on(26)] == ["hearing-3-1"]
        assert grid.event_count == 3

    def test_events_outside_month_are_excluded(self, projector):
        items = [
            _item("a", date(2024, 4, 30)),
            _item("b", date(2024, 5, 1)),
            _item("c", date(2024, 6, 1)),
            _item("d", date(2023, 5, 1)),
        ]
        grid = projector.project(2024, 4, items, today=date(2024, 5, 1))
        assert grid.event_count == 1
        assert [e.id for e in grid.events_on(1)] == ["b"]

    def test_completeness(self, projector):
        items = [_item(f"i{n}", date(2024, 2, 1 + (n * 7) % 29)) for n in range(40)]
        grid = projector.project(2024, 1, items, today=date(2024, 2, 1))
        in_month = [i for i in items if i.date.year == 2024 and i.date.month == 2]
        assert grid.event_count == len(in_month)
        for cell in grid.cells:
            assert all(e.date.day == cell.day for e in cell.events)

    def test_same_day_keeps_input_order(self, projector):
        day = date(2024, 5, 10)
        items = [
            _item("hearing", day, CalendarEventType.HEARING),
            _item("event", day),
            _item("task", day, CalendarEventType.TASK),
        ]
        grid = projector.project(2024, 4, items, today=day)
        assert [e.id for e in grid.events_on(10)] == ["hearing", "event", "task"]

    def test_projection_is_idempotent(self, projector, sample_event, sample_project, sample_case):
        items = CalendarNormalizer().normalize([sample_event], [sample_project], [sample_case])
        first = projector.project(2024, 4, items, today=date(2024, 5, 25))
        second = projector.project(2024, 4, items, today=date(2024, 5, 25))
        assert first == second


class TestNavigation:
    @pytest.mark.parametrize(
        "start,delta,expected",
        [
            ((2024, 0), -1, (2023, 11)),
            ((2024, 11), 1, (2025, 0)),
            ((2024, 4), 0, (2024, 4)),
            ((2024, 4), 14, (2025, 6)),
            ((2024, 2), -27, (2021, 11)),
        ],
    )
    def test_shift(self, start, delta, expected):
        assert CalendarProjector.shift(*start, delta) == expected

    def test_shift_from_month_end_lands_on_valid_month(self, projector):
        year, month = projector.shift(*CalendarProjector.month_of(date(2024, 1, 31)), 1)
        assert (year, month) == (2024, 1)
        assert projector.days_in_month(year, month) == 29

    def test_month_of(self):
        assert CalendarProjector.month_of(date(2024, 12, 5)) == (2024, 11)
