"""Fetch-and-aggregate cycles for the panel's aggregate screens.

A cycle fetches every source collection a screen needs concurrently, waits
for all of them, and only then aggregates. Any failed fetch fails the whole
screen with a single error. Each cycle is tagged with a generation id; a
result whose generation is no longer the latest (the screen navigated or was
closed meanwhile) is discarded instead of applied.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import Any, Generic, TypeVar

from aidpanel.db.repository import PanelRepository
from aidpanel.engines.calendar_projector import CalendarProjector
from aidpanel.engines.dashboard import DashboardAggregator
from aidpanel.engines.ledger_merger import LedgerMerger
from aidpanel.engines.map_projector import DEFAULT_LAYERS, MapProjector
from aidpanel.engines.stats import StatAggregator
from aidpanel.exceptions import FetchError, StaleResultError
from aidpanel.models.enums import LedgerKind, MapLayer
from aidpanel.models.reports import AnalyticsReport, DashboardReport, MessageReport
from aidpanel.models.views import CalendarMonth, LedgerEntry, MapPoint
from aidpanel.normalization.calendar import CalendarNormalizer

logger = logging.getLogger(__name__)

ViewT = TypeVar("ViewT")
FetchSources = Mapping[str, Callable[[], list]]
Collections = dict[str, list]

DEFAULT_CONCURRENCY = 4


class ScreenStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    FAILED = "failed"


@dataclass
class ScreenState(Generic[ViewT]):
    status: ScreenStatus = ScreenStatus.IDLE
    generation: int = 0
    view: ViewT | None = None
    error: str | None = None


class ScreenLoader(Generic[ViewT]):
    """Runs fetch-and-aggregate cycles for one screen and owns its state."""

    def __init__(self, name: str, concurrency: int = DEFAULT_CONCURRENCY) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be a positive integer")
        self.name = name
        self.concurrency = concurrency
        self.state: ScreenState[ViewT] = ScreenState()
        self.snapshot: Collections | None = None
        self.closed = False
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def latest_generation(self) -> int:
        return self._generation

    def begin(self) -> int:
        """Start a new cycle. Returns its generation id."""
        with self._lock:
            self._generation += 1
            self.state = ScreenState(
                status=ScreenStatus.LOADING,
                generation=self._generation,
                view=self.state.view,
            )
            return self._generation

    def invalidate(self) -> None:
        """Supersede any in-flight cycle, e.g. when the user navigates away."""
        with self._lock:
            self._generation += 1

    def close(self) -> None:
        """Tear the screen down. Results arriving afterwards are discarded."""
        self.closed = True
        self.invalidate()

    def is_current(self, generation: int) -> bool:
        return not self.closed and generation == self._generation

    def apply(
        self,
        generation: int,
        view: ViewT | None = None,
        error: str | None = None,
        strict: bool = False,
    ) -> bool:
        """Apply a cycle's outcome if its generation is still the latest.

        Returns False (or raises StaleResultError when ``strict``) for a
        superseded generation, leaving the state untouched.
        """
        with self._lock:
            if not self.is_current(generation):
                logger.info(
                    "Discarding stale %s result (generation %d, latest %d)",
                    self.name, generation, self.latest_generation,
                )
                if strict:
                    raise StaleResultError(generation, self.latest_generation)
                return False
            if error is not None:
                self.state = ScreenState(status=ScreenStatus.FAILED, generation=generation, error=error)
            else:
                self.state = ScreenState(status=ScreenStatus.RENDERED, generation=generation, view=view)
            return True

    def fetch_all(self, sources: FetchSources) -> Collections:
        """Fetch every source concurrently; fail on the first failure.

        Raises:
            FetchError: naming the first source (in declaration order) that failed.
        """
        names = list(sources)
        if not names:
            return {}
        logger.info("Fetching %s for %s", ", ".join(names), self.name)
        with ThreadPoolExecutor(max_workers=min(self.concurrency, len(names))) as pool:
            futures = {name: pool.submit(sources[name]) for name in names}
            _, pending = wait(futures.values(), return_when=FIRST_EXCEPTION)
            for future in pending:
                future.cancel()

        collections: Collections = {}
        for name in names:
            future = futures[name]
            if future.cancelled():
                continue
            exc = future.exception()
            if exc is not None:
                logger.warning("Fetch of %s failed for %s: %s", name, self.name, exc)
                if isinstance(exc, FetchError):
                    raise exc
                raise FetchError(name, str(exc)) from exc
            collections[name] = future.result()
        return collections

    def load(self, sources: FetchSources, aggregate: Callable[[Collections], ViewT]) -> ScreenState[ViewT]:
        """Run one full cycle: fetch everything, then aggregate once."""
        generation = self.begin()
        try:
            collections = self.fetch_all(sources)
        except FetchError as exc:
            self.apply(generation, error=str(exc))
            return self.state
        if not self.is_current(generation):
            logger.info("%s was superseded during fetch; skipping aggregation", self.name)
            return self.state
        self.snapshot = collections
        self.apply(generation, view=aggregate(collections))
        return self.state

    def rederive(self, aggregate: Callable[[Collections], ViewT]) -> ScreenState[ViewT]:
        """Recompute the view from the last fetched snapshot, without refetching."""
        if self.snapshot is None:
            raise RuntimeError(f"{self.name} has no fetched snapshot to derive from")
        generation = self.begin()
        self.apply(generation, view=aggregate(self.snapshot))
        return self.state


# --- Screens ---


@dataclass(frozen=True)
class LedgerView:
    """The merged aid ledger plus the slice matching the current filters."""

    entries: tuple[LedgerEntry, ...]
    filtered: tuple[LedgerEntry, ...]
    kind: str = "all"
    search: str = ""


@dataclass
class PanelScreens:
    """Wires the store's fetch contracts to the aggregation engines."""

    repo: PanelRepository
    concurrency: int = DEFAULT_CONCURRENCY
    normalizer: CalendarNormalizer = field(default_factory=CalendarNormalizer)
    projector: CalendarProjector = field(default_factory=CalendarProjector)
    merger: LedgerMerger = field(default_factory=LedgerMerger)
    stats: StatAggregator = field(default_factory=StatAggregator)
    dashboard_engine: DashboardAggregator = field(default_factory=DashboardAggregator)
    map_projector: MapProjector = field(default_factory=MapProjector)

    def loader(self, name: str) -> ScreenLoader[Any]:
        return ScreenLoader(name, concurrency=self.concurrency)

    # Calendar

    def calendar_sources(self) -> FetchSources:
        return {
            "events": self.repo.fetch_events,
            "projects": self.repo.fetch_projects,
            "cases": self.repo.fetch_cases,
        }

    def calendar_view(self, year: int, month: int, today: date) -> Callable[[Collections], CalendarMonth]:
        def aggregate(collections: Collections) -> CalendarMonth:
            events = self.normalizer.normalize(
                collections["events"], collections["projects"], collections["cases"]
            )
            return self.projector.project(year, month, events, today)

        return aggregate

    def calendar(
        self, year: int, month: int, today: date, loader: ScreenLoader | None = None
    ) -> ScreenState[CalendarMonth]:
        loader = loader or self.loader("calendar")
        return loader.load(self.calendar_sources(), self.calendar_view(year, month, today))

    # Ledger

    def ledger_sources(self) -> FetchSources:
        return {
            "cash_payments": self.repo.fetch_cash_payments,
            "in_kind_transactions": self.repo.fetch_in_kind_transactions,
            "people": self.repo.fetch_people,
            "products": self.repo.fetch_products,
        }

    def ledger_view(self, kind: LedgerKind | str = "all", search: str = "") -> Callable[[Collections], LedgerView]:
        def aggregate(collections: Collections) -> LedgerView:
            entries = self.merger.merge(
                collections["cash_payments"],
                collections["in_kind_transactions"],
                collections["people"],
                collections["products"],
            )
            return LedgerView(
                entries=tuple(entries),
                filtered=tuple(self.merger.filter(entries, kind, search)),
                kind=str(kind),
                search=search,
            )

        return aggregate

    def ledger(
        self, kind: LedgerKind | str = "all", search: str = "", loader: ScreenLoader | None = None
    ) -> ScreenState[LedgerView]:
        loader = loader or self.loader("ledger")
        return loader.load(self.ledger_sources(), self.ledger_view(kind, search))

    # Reports

    def messages(self, loader: ScreenLoader | None = None) -> ScreenState[MessageReport]:
        loader = loader or self.loader("message report")
        return loader.load(
            {"messages": self.repo.fetch_messages},
            lambda c: self.stats.message_report(c["messages"]),
        )

    def analytics(self, loader: ScreenLoader | None = None) -> ScreenState[AnalyticsReport]:
        loader = loader or self.loader("analytics report")
        return loader.load(
            {
                "people": self.repo.fetch_people,
                "applications": self.repo.fetch_applications,
                "financial_records": self.repo.fetch_financial_records,
            },
            lambda c: self.stats.analytics_report(c["people"], c["applications"], c["financial_records"]),
        )

    def dashboard(self, today: date, loader: ScreenLoader | None = None) -> ScreenState[DashboardReport]:
        loader = loader or self.loader("dashboard")
        return loader.load(
            {
                "people": self.repo.fetch_people,
                "projects": self.repo.fetch_projects,
                "applications": self.repo.fetch_applications,
                "donations": self.repo.fetch_donations,
            },
            lambda c: self.dashboard_engine.build(
                c["people"], c["projects"], c["applications"], c["donations"], today
            ),
        )

    def map(
        self, layers: Iterable[MapLayer] = DEFAULT_LAYERS, loader: ScreenLoader | None = None
    ) -> ScreenState[list[MapPoint]]:
        loader = loader or self.loader("map")
        active = frozenset(layers)
        return loader.load(
            {"people": self.repo.fetch_people, "charity_boxes": self.repo.fetch_charity_boxes},
            lambda c: self.map_projector.project(c["people"], c["charity_boxes"], active),
        )
