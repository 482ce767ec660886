"""Report generation for AidPanel."""

from aidpanel.reports.calendar import CalendarReportGenerator
from aidpanel.reports.ledger import LedgerReportGenerator
from aidpanel.reports.stats import StatsReportGenerator

__all__ = [
    "CalendarReportGenerator",
    "LedgerReportGenerator",
    "StatsReportGenerator",
]
