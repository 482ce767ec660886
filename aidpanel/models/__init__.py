"""Data models for AidPanel."""

from aidpanel.models.enums import (
    ActivityKind,
    ApplicationStatus,
    CalendarEventType,
    Currency,
    FinancialDirection,
    LedgerKind,
    MapLayer,
    MembershipType,
    MessageChannel,
    PaymentPurpose,
    ProjectStatus,
)
from aidpanel.models.records import (
    AidApplication,
    CashPayment,
    CharityBox,
    Donation,
    Event,
    FinancialRecord,
    Hearing,
    InKindTransaction,
    LegalCase,
    Message,
    Person,
    Product,
    Project,
    Task,
)
from aidpanel.models.reports import (
    AnalyticsReport,
    DashboardReport,
    DashboardStats,
    MessageReport,
    MonthlyBucket,
    RecentActivity,
    StatBucket,
)
from aidpanel.models.views import (
    CalendarCell,
    CalendarEvent,
    CalendarMonth,
    CashLedgerEntry,
    InKindLedgerEntry,
    LedgerEntry,
    MapPoint,
)

__all__ = [
    "ActivityKind",
    "AidApplication",
    "AnalyticsReport",
    "ApplicationStatus",
    "CalendarCell",
    "CalendarEvent",
    "CalendarEventType",
    "CalendarMonth",
    "CashLedgerEntry",
    "CashPayment",
    "CharityBox",
    "Currency",
    "DashboardReport",
    "DashboardStats",
    "Donation",
    "Event",
    "FinancialDirection",
    "FinancialRecord",
    "Hearing",
    "InKindLedgerEntry",
    "InKindTransaction",
    "LedgerEntry",
    "LedgerKind",
    "LegalCase",
    "MapLayer",
    "MapPoint",
    "MembershipType",
    "Message",
    "MessageChannel",
    "MessageReport",
    "MonthlyBucket",
    "PaymentPurpose",
    "Person",
    "Product",
    "Project",
    "ProjectStatus",
    "RecentActivity",
    "StatBucket",
    "Task",
]
