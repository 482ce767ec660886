"""Aggregation engines."""

from aidpanel.engines.calendar_projector import CalendarProjector
from aidpanel.engines.dashboard import DashboardAggregator
from aidpanel.engines.filters import FilterEngine
from aidpanel.engines.ledger_merger import LedgerMerger
from aidpanel.engines.map_projector import MapProjector
from aidpanel.engines.stats import StatAggregator

__all__ = [
    "CalendarProjector",
    "DashboardAggregator",
    "FilterEngine",
    "LedgerMerger",
    "MapProjector",
    "StatAggregator",
]
