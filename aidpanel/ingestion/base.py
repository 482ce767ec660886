"""Base adapter interface for data ingestion."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from aidpanel.models.records import (
    AidApplication,
    CashPayment,
    CharityBox,
    Donation,
    Event,
    FinancialRecord,
    InKindTransaction,
    LegalCase,
    Message,
    Person,
    Product,
    Project,
)


@dataclass
class Snapshot:
    """Bundles every source collection parsed from one import file."""

    events: list[Event] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    cases: list[LegalCase] = field(default_factory=list)
    cash_payments: list[CashPayment] = field(default_factory=list)
    in_kind_transactions: list[InKindTransaction] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)
    people: list[Person] = field(default_factory=list)
    financial_records: list[FinancialRecord] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)
    applications: list[AidApplication] = field(default_factory=list)
    donations: list[Donation] = field(default_factory=list)
    charity_boxes: list[CharityBox] = field(default_factory=list)

    @property
    def record_count(self) -> int:
        return sum(len(records) for records in self.collections().values())

    def collections(self) -> dict[str, list]:
        return {
            "events": self.events,
            "projects": self.projects,
            "cases": self.cases,
            "cash_payments": self.cash_payments,
            "in_kind_transactions": self.in_kind_transactions,
            "products": self.products,
            "people": self.people,
            "financial_records": self.financial_records,
            "messages": self.messages,
            "applications": self.applications,
            "donations": self.donations,
            "charity_boxes": self.charity_boxes,
        }


class BaseAdapter(ABC):
    """Abstract base class for all ingestion adapters."""

    @abstractmethod
    def parse(self, file_path: Path) -> Snapshot:
        """Parse a file and return a Snapshot with typed models."""
        ...

    @abstractmethod
    def validate(self, data: Snapshot) -> list[str]:
        """Validate parsed data. Returns a list of validation warning messages."""
        ...
