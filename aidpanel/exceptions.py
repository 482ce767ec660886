"""Custom exceptions for AidPanel."""


class AidPanelError(Exception):
    """Base exception for aggregation and data-store errors."""


class FetchError(AidPanelError):
    """Raised when a source collection cannot be fetched for a screen."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Fetch failed for {source}: {message}")


class SnapshotImportError(AidPanelError):
    """Raised when a snapshot file cannot be imported."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Import error from {source}: {message}")


class CalendarGridError(AidPanelError):
    """Raised when a month yields an impossible day count.

    This is a programming defect in date construction and is never caught.
    """

    def __init__(self, year: int, month: int, days: int):
        self.year = year
        self.month = month
        self.days = days
        super().__init__(f"Impossible day count {days} for {year}-{month + 1:02d}")


class StaleResultError(AidPanelError):
    """Raised when a superseded generation is applied in strict mode."""

    def __init__(self, requested: int, latest: int):
        self.requested = requested
        self.latest = latest
        super().__init__(
            f"Result of generation {requested} is stale (latest is {latest})"
        )
