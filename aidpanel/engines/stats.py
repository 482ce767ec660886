"""Statistical rollups: categorical counts and sums, month-bucketed series.

Every rollup reads the typed source field, never a display string.
Categorical buckets keep first-seen order; month buckets are sorted by their
``YYYY-MM`` key and truncated to the most recent ``window`` distinct months.
"""

from collections.abc import Callable, Iterable, Sequence
from datetime import date
from decimal import Decimal
from typing import TypeVar

from aidpanel.models.enums import FinancialDirection, MessageChannel
from aidpanel.models.records import AidApplication, FinancialRecord, Message, Person
from aidpanel.models.reports import AnalyticsReport, MessageReport, MonthlyBucket, StatBucket

T = TypeVar("T")
BucketT = TypeVar("BucketT", StatBucket, MonthlyBucket)

DEFAULT_WINDOW = 12


def month_key(day: date) -> str:
    """Truncate a date to its ``YYYY-MM`` bucket key."""
    return f"{day.year:04d}-{day.month:02d}"


def latest_months(buckets: Iterable[BucketT], window: int) -> list[BucketT]:
    """Sort month buckets ascending and keep the last ``window`` of them."""
    ordered = sorted(buckets, key=lambda b: b.bucket_key)
    return ordered[-window:] if window > 0 else []


def _as_decimal(value: Decimal | int | float) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


class StatAggregator:
    """Reduces raw collections into chart-ready series."""

    def __init__(self, window: int = DEFAULT_WINDOW) -> None:
        self.window = window

    # --- Categorical rollups ---

    def count_by(self, records: Iterable[T], key: Callable[[T], str | None]) -> list[StatBucket]:
        """Count records per category. Records whose key is ``None`` are skipped."""
        buckets: dict[str, StatBucket] = {}
        for record in records:
            label = key(record)
            if label is None:
                continue
            bucket = buckets.setdefault(str(label), StatBucket(bucket_key=str(label)))
            bucket.count += 1
        return list(buckets.values())

    def count_by_each(self, records: Iterable[T], keys: Callable[[T], Iterable[str]]) -> list[StatBucket]:
        """Count multi-valued categories: a record adds one to each of its labels."""
        buckets: dict[str, StatBucket] = {}
        for record in records:
            for label in keys(record):
                bucket = buckets.setdefault(str(label), StatBucket(bucket_key=str(label)))
                bucket.count += 1
        return list(buckets.values())

    def sum_by(
        self,
        records: Iterable[T],
        key: Callable[[T], str | None],
        value: Callable[[T], Decimal | int],
    ) -> list[StatBucket]:
        """Sum ``value`` per category; ``count`` carries the record count."""
        buckets: dict[str, StatBucket] = {}
        for record in records:
            label = key(record)
            if label is None:
                continue
            bucket = buckets.setdefault(str(label), StatBucket(bucket_key=str(label)))
            bucket.count += 1
            bucket.total += _as_decimal(value(record))
        return list(buckets.values())

    # --- Month-bucketed series ---

    def monthly_totals(
        self,
        records: Iterable[T],
        date_of: Callable[[T], date],
        value: Callable[[T], Decimal | int] | None = None,
        window: int | None = None,
    ) -> list[StatBucket]:
        """Count (and optionally sum) records per month, last ``window`` months."""
        buckets: dict[str, StatBucket] = {}
        for record in records:
            key = month_key(date_of(record))
            bucket = buckets.setdefault(key, StatBucket(bucket_key=key))
            bucket.count += 1
            if value is not None:
                bucket.total += _as_decimal(value(record))
        return latest_months(buckets.values(), self.window if window is None else window)

    def monthly_sums(
        self,
        records: Iterable[T],
        date_of: Callable[[T], date],
        category_of: Callable[[T], str],
        value: Callable[[T], Decimal | int],
        categories: Sequence[str] = (),
        window: int | None = None,
    ) -> list[MonthlyBucket]:
        """Per-category sub-sums inside each month bucket.

        A bucket is created zero-valued for every name in ``categories`` the
        first time its month key is seen, then incremented.
        """
        buckets: dict[str, MonthlyBucket] = {}
        for record in records:
            key = month_key(date_of(record))
            bucket = buckets.get(key)
            if bucket is None:
                bucket = MonthlyBucket(
                    bucket_key=key,
                    values={str(name): Decimal("0") for name in categories},
                )
                buckets[key] = bucket
            category = str(category_of(record))
            bucket.values[category] = bucket.value(category) + _as_decimal(value(record))
        return latest_months(buckets.values(), self.window if window is None else window)

    # --- Screen reports ---

    def message_report(self, messages: Sequence[Message]) -> MessageReport:
        """Messaging reach: counts per channel, recipients reached per audience."""
        return MessageReport(
            total_messages=len(messages),
            total_recipients=sum(m.recipient_count for m in messages),
            sms_count=sum(1 for m in messages if m.channel == MessageChannel.SMS),
            email_count=sum(1 for m in messages if m.channel == MessageChannel.EMAIL),
            by_channel=self.count_by(messages, lambda m: m.channel.value),
            by_audience=self.sum_by(messages, lambda m: m.audience, lambda m: m.recipient_count),
            monthly_trend=self.monthly_totals(messages, lambda m: m.sent_at),
        )

    def analytics_report(
        self,
        people: Sequence[Person],
        applications: Sequence[AidApplication],
        financials: Sequence[FinancialRecord],
    ) -> AnalyticsReport:
        """Nationality of aid recipients, application status, monthly cash flow."""
        recipients = [p for p in people if p.is_aid_recipient]
        return AnalyticsReport(
            total_people=len(people),
            nationality=self.count_by_each(recipients, lambda p: p.nationalities),
            application_status=self.count_by(applications, lambda a: a.status.value),
            monthly_financials=self.monthly_sums(
                financials,
                date_of=lambda r: r.record_date,
                category_of=lambda r: r.direction.value,
                value=lambda r: r.amount,
                categories=[FinancialDirection.INCOME.value, FinancialDirection.EXPENSE.value],
            ),
        )
