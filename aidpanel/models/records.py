"""Raw source records as returned by the data-store fetch contracts."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from aidpanel.models.enums import (
    ApplicationStatus,
    Currency,
    FinancialDirection,
    MembershipType,
    MessageChannel,
    PaymentPurpose,
    ProjectStatus,
)


class Event(BaseModel):
    id: str
    title: str
    event_date: date | None = None
    time: str | None = None
    location: str | None = None
    description: str | None = None
    status: str | None = None


class Task(BaseModel):
    id: str
    title: str
    due_date: date | None = None
    status: str | None = None
    priority: str | None = None


class Project(BaseModel):
    id: str
    name: str
    manager: str | None = None
    status: ProjectStatus = ProjectStatus.PLANNING
    tasks: list[Task] = Field(default_factory=list)


class Hearing(BaseModel):
    id: str
    hearing_date: date | None = None
    time: str | None = None
    description: str | None = None


class LegalCase(BaseModel):
    id: str
    case_number: str | None = None
    subject: str
    client: str
    status: str | None = None
    hearings: list[Hearing] = Field(default_factory=list)


class CashPayment(BaseModel):
    id: str
    person_name: str = ""
    purpose: PaymentPurpose
    amount: Decimal
    currency: Currency = Currency.TRY
    description: str = ""
    payment_date: date
    status: str | None = None


class InKindTransaction(BaseModel):
    id: str
    person_id: str
    product_id: str
    quantity: Decimal = Field(ge=0)
    unit: str
    transaction_date: date
    notes: str | None = None


class Product(BaseModel):
    id: str
    name: str
    unit: str | None = None
    category: str | None = None


class Person(BaseModel):
    id: str
    first_name: str
    last_name: str = ""
    nationalities: list[str] = Field(default_factory=list)
    latitude: float | None = None
    longitude: float | None = None
    aid_types_received: list[str] = Field(default_factory=list)
    membership_type: MembershipType | None = None
    registration_date: date | None = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_aid_recipient(self) -> bool:
        return len(self.aid_types_received) > 0


class FinancialRecord(BaseModel):
    id: str
    record_date: date
    direction: FinancialDirection
    category: str | None = None
    amount: Decimal
    description: str | None = None


class Message(BaseModel):
    id: str
    channel: MessageChannel
    audience: str
    recipient_count: int = Field(ge=0)
    title: str | None = None
    sent_at: date


class AidApplication(BaseModel):
    id: str
    applicant_id: str
    status: ApplicationStatus
    requested_amount: Decimal | None = None
    applied_at: date


class Donation(BaseModel):
    id: str
    donor_id: str
    amount: Decimal
    currency: Currency = Currency.TRY
    donation_date: date


class CharityBox(BaseModel):
    id: str
    code: str
    location: str = ""
    latitude: float | None = None
    longitude: float | None = None
    status: str | None = None
