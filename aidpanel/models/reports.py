"""Report series models produced by the statistics and dashboard engines."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from aidpanel.models.enums import ActivityKind


class StatBucket(BaseModel):
    """One bucket of a categorical or month-keyed series."""

    bucket_key: str
    count: int = 0
    total: Decimal = Decimal("0")


class MonthlyBucket(BaseModel):
    """A ``YYYY-MM`` bucket carrying per-category sub-sums."""

    bucket_key: str
    values: dict[str, Decimal] = Field(default_factory=dict)

    def value(self, category: str) -> Decimal:
        return self.values.get(category, Decimal("0"))


class MessageReport(BaseModel):
    total_messages: int
    total_recipients: int
    sms_count: int
    email_count: int
    by_channel: list[StatBucket]
    by_audience: list[StatBucket]
    monthly_trend: list[StatBucket]


class AnalyticsReport(BaseModel):
    total_people: int
    nationality: list[StatBucket]
    application_status: list[StatBucket]
    monthly_financials: list[MonthlyBucket]


class DashboardStats(BaseModel):
    total_members: int
    monthly_donations: Decimal
    active_projects: int
    pending_applications: int


class RecentActivity(BaseModel):
    id: str
    kind: ActivityKind
    timestamp: date
    description: str
    amount_display: str | None = None
    link: str


class DashboardReport(BaseModel):
    reference_date: date
    stats: DashboardStats
    recent_activities: list[RecentActivity]
    monthly_donations: list[StatBucket]
