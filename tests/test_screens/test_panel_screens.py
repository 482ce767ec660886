"""Tests for the screen wiring over a seeded store."""

from datetime import date

from aidpanel.models.enums import LedgerKind, MapLayer
from aidpanel.screens import PanelScreens, ScreenStatus


class TestCalendarScreen:
    def test_may_2024(self, seeded_repo):
        state = PanelScreens(seeded_repo).calendar(2024, 4, today=date(2024, 5, 25))
        assert state.status == ScreenStatus.RENDERED
        grid = state.view
        assert grid.leading_blanks == 2
        assert [e.id for e in grid.events_on(25)] == ["event-1", "task-7-1"]
        assert [e.id for e in grid.events_on(26)] == ["hearing-3-1"]
        assert [c.day for c in grid.cells if c.is_today] == [25]

    def test_empty_month(self, seeded_repo):
        state = PanelScreens(seeded_repo).calendar(2024, 6, today=date(2024, 5, 25))
        assert state.view.event_count == 0

    def test_store_failure_fails_screen(self, seeded_repo, monkeypatch):
        def broken():
            raise RuntimeError("disk I/O error")

        monkeypatch.setattr(seeded_repo, "fetch_cases", broken)
        state = PanelScreens(seeded_repo).calendar(2024, 4, today=date(2024, 5, 25))
        assert state.status == ScreenStatus.FAILED
        assert state.error == "Fetch failed for cases: disk I/O error"


class TestLedgerScreen:
    def test_entries_and_filtered_slice(self, seeded_repo):
        state = PanelScreens(seeded_repo).ledger(kind=LedgerKind.IN_KIND, search="")
        view = state.view
        assert len(view.entries) == 6
        assert [e.id for e in view.filtered] == ["inkind-20", "inkind-22", "inkind-21"]

    def test_filter_change_rederives_from_snapshot(self, seeded_repo):
        screens = PanelScreens(seeded_repo)
        loader = screens.loader("ledger")
        screens.ledger(loader=loader)
        state = loader.rederive(screens.ledger_view(kind="all", search="zeynep"))
        assert [e.id for e in state.view.filtered] == ["cash-12"]


class TestReportScreens:
    def test_messages(self, seeded_repo):
        report = PanelScreens(seeded_repo).messages().view
        assert report.total_messages == 4
        assert report.sms_count == 3

    def test_analytics(self, seeded_repo):
        report = PanelScreens(seeded_repo).analytics().view
        assert report.total_people == 3
        assert [b.bucket_key for b in report.nationality] == ["T.C.", "Suriye"]

    def test_dashboard(self, seeded_repo):
        report = PanelScreens(seeded_repo).dashboard(today=date(2024, 6, 15)).view
        assert report.stats.pending_applications == 3
        assert len(report.recent_activities) == 5

    def test_map(self, seeded_repo):
        points = PanelScreens(seeded_repo).map([MapLayer.BOXES]).view
        assert [p.id for p in points] == ["box-k1"]
