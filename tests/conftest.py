"""Shared test fixtures for AidPanel."""

from datetime import date
from decimal import Decimal

import pytest

from aidpanel.db.repository import PanelRepository
from aidpanel.db.schema import create_schema
from aidpanel.models.enums import (
    ApplicationStatus,
    Currency,
    FinancialDirection,
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


@pytest.fixture
def sample_event() -> Event:
    return Event(
        id="1",
        title="Kermes",
        event_date=date(2024, 5, 25),
        time="14:00",
        location="Merkez",
    )


@pytest.fixture
def sample_project() -> Project:
    return Project(
        id="7",
        name="Kış Yardımı",
        status=ProjectStatus.IN_PROGRESS,
        tasks=[
            Task(id="1", title="Koli hazırlığı", due_date=date(2024, 5, 25)),
            Task(id="2", title="Bütçe taslağı"),
        ],
    )


@pytest.fixture
def sample_case() -> LegalCase:
    return LegalCase(
        id="3",
        case_number="2024/15",
        subject="Kira uyuşmazlığı",
        client="Ayşe Yılmaz",
        hearings=[Hearing(id="1", hearing_date=date(2024, 5, 26), time="10:30")],
    )


@pytest.fixture
def sample_people() -> list[Person]:
    return [
        Person(
            id="p1",
            first_name="Ayşe",
            last_name="Yılmaz",
            nationalities=["T.C."],
            latitude=41.01,
            longitude=28.97,
            aid_types_received=["Nakit"],
            membership_type=MembershipType.STANDARD,
            registration_date=date(2024, 1, 10),
        ),
        Person(
            id="p2",
            first_name="Omar",
            last_name="Haddad",
            nationalities=["Suriye", "T.C."],
            aid_types_received=["Yardım Kolisi"],
            registration_date=date(2024, 3, 2),
        ),
        Person(
            id="p3",
            first_name="İsmail",
            last_name="Kaya",
            nationalities=["T.C."],
            latitude=41.05,
            longitude=29.01,
            membership_type=MembershipType.VOLUNTEER,
            registration_date=date(2024, 2, 20),
        ),
    ]


@pytest.fixture
def sample_products() -> list[Product]:
    return [
        Product(id="u1", name="Pirinç", unit="kg"),
        Product(id="u2", name="Battaniye", unit="Adet"),
    ]


@pytest.fixture
def aid_payment() -> CashPayment:
    return CashPayment(
        id="10",
        person_name="Ayşe Yılmaz",
        purpose=PaymentPurpose.AID_PAYMENT,
        amount=Decimal("500"),
        currency=Currency.TRY,
        description="Mayıs yardımı",
        payment_date=date(2024, 6, 1),
    )


@pytest.fixture
def rice_transaction() -> InKindTransaction:
    return InKindTransaction(
        id="20",
        person_id="p1",
        product_id="u1",
        quantity=Decimal("10"),
        unit="kg",
        transaction_date=date(2024, 6, 2),
    )


@pytest.fixture
def sample_payments(aid_payment: CashPayment) -> list[CashPayment]:
    return [
        aid_payment,
        CashPayment(
            id="11",
            person_name="Ofis",
            purpose=PaymentPurpose.EXPENSE_PAYMENT,
            amount=Decimal("12000"),
            description="Kira",
            payment_date=date(2024, 6, 3),
        ),
        CashPayment(
            id="12",
            person_name="Zeynep Demir",
            purpose=PaymentPurpose.SCHOLARSHIP_PAYMENT,
            amount=Decimal("750.50"),
            description="Burs",
            payment_date=date(2024, 5, 15),
        ),
        CashPayment(
            id="13",
            person_name="Mehmet Öz",
            purpose=PaymentPurpose.ELDER_SUPPORT,
            amount=Decimal("300"),
            currency=Currency.EUR,
            description="Vefa",
            payment_date=date(2024, 6, 2),
        ),
    ]


@pytest.fixture
def sample_transactions(rice_transaction: InKindTransaction) -> list[InKindTransaction]:
    return [
        rice_transaction,
        InKindTransaction(
            id="21",
            person_id="p2",
            product_id="u2",
            quantity=Decimal("2"),
            unit="Adet",
            transaction_date=date(2024, 5, 20),
        ),
        InKindTransaction(
            id="22",
            person_id="missing",
            product_id="u9",
            quantity=Decimal("1.5"),
            unit="Litre",
            transaction_date=date(2024, 6, 1),
        ),
    ]


@pytest.fixture
def sample_financials() -> list[FinancialRecord]:
    return [
        FinancialRecord(id="f1", record_date=date(2024, 1, 5), direction=FinancialDirection.INCOME, amount=Decimal("1000")),
        FinancialRecord(id="f2", record_date=date(2024, 1, 20), direction=FinancialDirection.EXPENSE, amount=Decimal("400")),
        FinancialRecord(id="f3", record_date=date(2023, 12, 31), direction=FinancialDirection.INCOME, amount=Decimal("250")),
        FinancialRecord(id="f4", record_date=date(2024, 2, 1), direction=FinancialDirection.EXPENSE, amount=Decimal("75.25")),
    ]


@pytest.fixture
def sample_messages() -> list[Message]:
    return [
        Message(id="m1", channel=MessageChannel.SMS, audience="Tüm Üyeler", recipient_count=120, sent_at=date(2024, 4, 3)),
        Message(id="m2", channel=MessageChannel.EMAIL, audience="Tüm Gönüllüler", recipient_count=40, sent_at=date(2024, 4, 18)),
        Message(id="m3", channel=MessageChannel.SMS, audience="Tüm Üyeler", recipient_count=118, sent_at=date(2024, 5, 2)),
        Message(id="m4", channel=MessageChannel.SMS, audience="Tüm Yardım Alanlar", recipient_count=0, sent_at=date(2024, 5, 9)),
    ]


@pytest.fixture
def sample_applications() -> list[AidApplication]:
    return [
        AidApplication(id="a1", applicant_id="p1", status=ApplicationStatus.PENDING, applied_at=date(2024, 6, 10)),
        AidApplication(id="a2", applicant_id="p2", status=ApplicationStatus.IN_REVIEW, applied_at=date(2024, 6, 12)),
        AidApplication(id="a3", applicant_id="ghost", status=ApplicationStatus.COMPLETED, applied_at=date(2024, 4, 1)),
        AidApplication(id="a4", applicant_id="p1", status=ApplicationStatus.PENDING, applied_at=date(2024, 2, 1)),
    ]


@pytest.fixture
def sample_donations() -> list[Donation]:
    return [
        Donation(id="d1", donor_id="p3", amount=Decimal("250"), donation_date=date(2024, 6, 5)),
        Donation(id="d2", donor_id="p1", amount=Decimal("100"), donation_date=date(2024, 5, 28)),
        Donation(id="d3", donor_id="nobody", amount=Decimal("50"), donation_date=date(2024, 6, 14)),
    ]


@pytest.fixture
def sample_boxes() -> list[CharityBox]:
    return [
        CharityBox(id="k1", code="KMB-001", location="Fatih", latitude=41.02, longitude=28.94),
        CharityBox(id="k2", code="KMB-002", location="Depo"),
    ]


@pytest.fixture
def db_conn(tmp_path):
    """Create a database file with the full schema."""
    conn = create_schema(tmp_path / "test.db")
    yield conn
    conn.close()


@pytest.fixture
def repo(db_conn) -> PanelRepository:
    return PanelRepository(db_conn)


@pytest.fixture
def seeded_repo(
    repo: PanelRepository,
    sample_event: Event,
    sample_project: Project,
    sample_case: LegalCase,
    sample_people: list[Person],
    sample_products: list[Product],
    sample_payments: list[CashPayment],
    sample_transactions: list[InKindTransaction],
    sample_financials: list[FinancialRecord],
    sample_messages: list[Message],
    sample_applications: list[AidApplication],
    sample_donations: list[Donation],
    sample_boxes: list[CharityBox],
) -> PanelRepository:
    repo.save_event(sample_event)
    repo.save_project(sample_project)
    repo.save_case(sample_case)
    for person in sample_people:
        repo.save_person(person)
    for product in sample_products:
        repo.save_product(product)
    for payment in sample_payments:
        repo.save_cash_payment(payment)
    for transaction in sample_transactions:
        repo.save_in_kind(transaction)
    for record in sample_financials:
        repo.save_financial_record(record)
    for message in sample_messages:
        repo.save_message(message)
    for application in sample_applications:
        repo.save_application(application)
    for donation in sample_donations:
        repo.save_donation(donation)
    for box in sample_boxes:
        repo.save_charity_box(box)
    return repo
