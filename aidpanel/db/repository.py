"""Data access layer for AidPanel.

Each ``fetch_*`` method implements one fetch contract: it returns the complete
collection in storage order or raises. Reads and writes are serialized on a
single lock so one connection can serve concurrent screen fetches.
"""

import json
import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from decimal import Decimal
from uuid import uuid4

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

logger = logging.getLogger(__name__)


def _optional_date(value: str | None) -> date | None:
    """Parse a stored ISO date; blank or malformed values read as missing."""
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        logger.debug("Unparseable stored date %r treated as missing", value)
        return None


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


class PanelRepository:
    """CRUD operations for the panel's source collections."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self._lock = threading.RLock()
        self._in_transaction = False

    def _query(self, sql: str, params: tuple = ()) -> list[dict]:
        with self._lock:
            cursor = self.conn.execute(sql, params)
            columns = [desc[0] for desc in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]

    def _commit(self) -> None:
        if not self._in_transaction:
            self.conn.commit()

    def _write(self, sql: str, params: tuple) -> None:
        with self._lock:
            self.conn.execute(sql, params)
            self._commit()

    @contextmanager
    def transaction(self) -> Iterator["PanelRepository"]:
        """Group saves into one commit; any error rolls all of them back."""
        with self._lock:
            self._in_transaction = True
            try:
                yield self
                self.conn.commit()
            except Exception:
                self.conn.rollback()
                raise
            finally:
                self._in_transaction = False

    # --- Import batches ---

    def create_import_batch(self, source: str, file_path: str, record_count: int = 0) -> str:
        """Create an import batch record. Returns the batch ID."""
        batch_id = str(uuid4())
        self._write(
            """INSERT INTO import_batches (id, source, file_path, record_count, status)
               VALUES (?, ?, ?, ?, 'completed')""",
            (batch_id, source, file_path, record_count),
        )
        return batch_id

    def check_batch_duplicate(self, file_path: str) -> bool:
        rows = self._query("SELECT 1 FROM import_batches WHERE file_path = ? LIMIT 1", (file_path,))
        return bool(rows)

    # --- Events ---

    def save_event(self, event: Event) -> None:
        self._write(
            """INSERT OR REPLACE INTO events
               (id, title, event_date, event_time, location, description, status)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (
                event.id,
                event.title,
                _iso(event.event_date),
                event.time,
                event.location,
                event.description,
                event.status,
            ),
        )

    def fetch_events(self) -> list[Event]:
        return [
            Event(
                id=row["id"],
                title=row["title"],
                event_date=_optional_date(row["event_date"]),
                time=row["event_time"],
                location=row["location"],
                description=row["description"],
                status=row["status"],
            )
            for row in self._query("SELECT * FROM events ORDER BY rowid")
        ]

    # --- Projects and their tasks ---

    def save_project(self, project: Project) -> None:
        with self._lock:
            self.conn.execute(
                "INSERT OR REPLACE INTO projects (id, name, manager, status) VALUES (?, ?, ?, ?)",
                (project.id, project.name, project.manager, project.status.value),
            )
            self.conn.execute("DELETE FROM tasks WHERE project_id = ?", (project.id,))
            for position, task in enumerate(project.tasks):
                self.conn.execute(
                    """INSERT OR REPLACE INTO tasks
                       (project_id, id, position, title, due_date, status, priority)
                       VALUES (?, ?, ?, ?, ?, ?, ?)""",
                    (
                        project.id,
                        task.id,
                        position,
                        task.title,
                        _iso(task.due_date),
                        task.status,
                        task.priority,
                    ),
                )
            self._commit()

    def fetch_projects(self) -> list[Project]:
        with self._lock:
            project_rows = self._query("SELECT * FROM projects ORDER BY rowid")
            task_rows = self._query("SELECT * FROM tasks ORDER BY project_id, position")

        tasks_by_project: dict[str, list[Task]] = {}
        for row in task_rows:
            tasks_by_project.setdefault(row["project_id"], []).append(Task(
                id=row["id"],
                title=row["title"],
                due_date=_optional_date(row["due_date"]),
                status=row["status"],
                priority=row["priority"],
            ))
        return [
            Project(
                id=row["id"],
                name=row["name"],
                manager=row["manager"],
                status=ProjectStatus(row["status"]),
                tasks=tasks_by_project.get(row["id"], []),
            )
            for row in project_rows
        ]

    # --- Legal cases and their hearings ---

    def save_case(self, case: LegalCase) -> None:
        with self._lock:
            self.conn.execute(
                """INSERT OR REPLACE INTO legal_cases (id, case_number, subject, client, status)
                   VALUES (?, ?, ?, ?, ?)""",
                (case.id, case.case_number, case.subject, case.client, case.status),
            )
            self.conn.execute("DELETE FROM hearings WHERE case_id = ?", (case.id,))
            for position, hearing in enumerate(case.hearings):
                self.conn.execute(
                    """INSERT OR REPLACE INTO hearings
                       (case_id, id, position, hearing_date, hearing_time, description)
                       VALUES (?, ?, ?, ?, ?, ?)""",
                    (
                        case.id,
                        hearing.id,
                        position,
                        _iso(hearing.hearing_date),
                        hearing.time,
                        hearing.description,
                    ),
                )
            self._commit()

    def fetch_cases(self) -> list[LegalCase]:
        with self._lock:
            case_rows = self._query("SELECT * FROM legal_cases ORDER BY rowid")
            hearing_rows = self._query("SELECT * FROM hearings ORDER BY case_id, position")

        hearings_by_case: dict[str, list[Hearing]] = {}
        for row in hearing_rows:
            hearings_by_case.setdefault(row["case_id"], []).append(Hearing(
                id=row["id"],
                hearing_date=_optional_date(row["hearing_date"]),
                time=row["hearing_time"],
                description=row["description"],
            ))
        return [
            LegalCase(
                id=row["id"],
                case_number=row["case_number"],
                subject=row["subject"],
                client=row["client"],
                status=row["status"],
                hearings=hearings_by_case.get(row["id"], []),
            )
            for row in case_rows
        ]

    # --- Cash payments ---

    def save_cash_payment(self, payment: CashPayment) -> None:
        self._write(
            """INSERT OR REPLACE INTO cash_payments
               (id, person_name, purpose, amount, currency, description, payment_date, status)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                payment.id,
                payment.person_name,
                payment.purpose.value,
                str(payment.amount),
                payment.currency.value,
                payment.description,
                payment.payment_date.isoformat(),
                payment.status,
            ),
        )

    def fetch_cash_payments(self) -> list[CashPayment]:
        return [
            CashPayment(
                id=row["id"],
                person_name=row["person_name"],
                purpose=PaymentPurpose(row["purpose"]),
                amount=Decimal(row["amount"]),
                currency=Currency(row["currency"]),
                description=row["description"],
                payment_date=date.fromisoformat(row["payment_date"]),
                status=row["status"],
            )
            for row in self._query("SELECT * FROM cash_payments ORDER BY rowid")
        ]

    # --- In-kind transactions and products ---

    def save_in_kind(self, transaction: InKindTransaction) -> None:
        self._write(
            """INSERT OR REPLACE INTO in_kind_transactions
               (id, person_id, product_id, quantity, unit, transaction_date, notes)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (
                transaction.id,
                transaction.person_id,
                transaction.product_id,
                str(transaction.quantity),
                transaction.unit,
                transaction.transaction_date.isoformat(),
                transaction.notes,
            ),
        )

    def fetch_in_kind_transactions(self) -> list[InKindTransaction]:
        return [
            InKindTransaction(
                id=row["id"],
                person_id=row["person_id"],
                product_id=row["product_id"],
                quantity=Decimal(row["quantity"]),
                unit=row["unit"],
                transaction_date=date.fromisoformat(row["transaction_date"]),
                notes=row["notes"],
            )
            for row in self._query("SELECT * FROM in_kind_transactions ORDER BY rowid")
        ]

    def save_product(self, product: Product) -> None:
        self._write(
            "INSERT OR REPLACE INTO products (id, name, unit, category) VALUES (?, ?, ?, ?)",
            (product.id, product.name, product.unit, product.category),
        )

    def fetch_products(self) -> list[Product]:
        return [
            Product(id=row["id"], name=row["name"], unit=row["unit"], category=row["category"])
            for row in self._query("SELECT * FROM products ORDER BY rowid")
        ]

    # --- People ---

    def save_person(self, person: Person) -> None:
        self._write(
            """INSERT OR REPLACE INTO people
               (id, first_name, last_name, nationalities, latitude, longitude,
                aid_types_received, membership_type, registration_date)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                person.id,
                person.first_name,
                person.last_name,
                json.dumps(person.nationalities, ensure_ascii=False),
                person.latitude,
                person.longitude,
                json.dumps(person.aid_types_received, ensure_ascii=False),
                person.membership_type.value if person.membership_type else None,
                _iso(person.registration_date),
            ),
        )

    def fetch_people(self) -> list[Person]:
        return [
            Person(
                id=row["id"],
                first_name=row["first_name"],
                last_name=row["last_name"],
                nationalities=json.loads(row["nationalities"]) if row["nationalities"] else [],
                latitude=row["latitude"],
                longitude=row["longitude"],
                aid_types_received=(
                    json.loads(row["aid_types_received"]) if row["aid_types_received"] else []
                ),
                membership_type=(
                    MembershipType(row["membership_type"]) if row["membership_type"] else None
                ),
                registration_date=_optional_date(row["registration_date"]),
            )
            for row in self._query("SELECT * FROM people ORDER BY rowid")
        ]

    # --- Financial records ---

    def save_financial_record(self, record: FinancialRecord) -> None:
        self._write(
            """INSERT OR REPLACE INTO financial_records
               (id, record_date, direction, category, amount, description)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (
                record.id,
                record.record_date.isoformat(),
                record.direction.value,
                record.category,
                str(record.amount),
                record.description,
            ),
        )

    def fetch_financial_records(self) -> list[FinancialRecord]:
        return [
            FinancialRecord(
                id=row["id"],
                record_date=date.fromisoformat(row["record_date"]),
                direction=FinancialDirection(row["direction"]),
                category=row["category"],
                amount=Decimal(row["amount"]),
                description=row["description"],
            )
            for row in self._query("SELECT * FROM financial_records ORDER BY rowid")
        ]

    # --- Messages ---

    def save_message(self, message: Message) -> None:
        self._write(
            """INSERT OR REPLACE INTO messages
               (id, channel, audience, recipient_count, title, sent_at)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (
                message.id,
                message.channel.value,
                message.audience,
                message.recipient_count,
                message.title,
                message.sent_at.isoformat(),
            ),
        )

    def fetch_messages(self) -> list[Message]:
        return [
            Message(
                id=row["id"],
                channel=MessageChannel(row["channel"]),
                audience=row["audience"],
                recipient_count=row["recipient_count"],
                title=row["title"],
                sent_at=date.fromisoformat(row["sent_at"][:10]),
            )
            for row in self._query("SELECT * FROM messages ORDER BY rowid")
        ]

    # --- Aid applications ---

    def save_application(self, application: AidApplication) -> None:
        self._write(
            """INSERT OR REPLACE INTO aid_applications
               (id, applicant_id, status, requested_amount, applied_at)
               VALUES (?, ?, ?, ?, ?)""",
            (
                application.id,
                application.applicant_id,
                application.status.value,
                str(application.requested_amount) if application.requested_amount is not None else None,
                application.applied_at.isoformat(),
            ),
        )

    def fetch_applications(self) -> list[AidApplication]:
        return [
            AidApplication(
                id=row["id"],
                applicant_id=row["applicant_id"],
                status=ApplicationStatus(row["status"]),
                requested_amount=(
                    Decimal(row["requested_amount"]) if row["requested_amount"] is not None else None
                ),
                applied_at=date.fromisoformat(row["applied_at"]),
            )
            for row in self._query("SELECT * FROM aid_applications ORDER BY rowid")
        ]

    # --- Donations ---

    def save_donation(self, donation: Donation) -> None:
        self._write(
            """INSERT OR REPLACE INTO donations (id, donor_id, amount, currency, donation_date)
               VALUES (?, ?, ?, ?, ?)""",
            (
                donation.id,
                donation.donor_id,
                str(donation.amount),
                donation.currency.value,
                donation.donation_date.isoformat(),
            ),
        )

    def fetch_donations(self) -> list[Donation]:
        return [
            Donation(
                id=row["id"],
                donor_id=row["donor_id"],
                amount=Decimal(row["amount"]),
                currency=Currency(row["currency"]),
                donation_date=date.fromisoformat(row["donation_date"]),
            )
            for row in self._query("SELECT * FROM donations ORDER BY rowid")
        ]

    # --- Charity boxes ---

    def save_charity_box(self, box: CharityBox) -> None:
        self._write(
            """INSERT OR REPLACE INTO charity_boxes (id, code, location, latitude, longitude, status)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (box.id, box.code, box.location, box.latitude, box.longitude, box.status),
        )

    def fetch_charity_boxes(self) -> list[CharityBox]:
        return [
            CharityBox(
                id=row["id"],
                code=row["code"],
                location=row["location"],
                latitude=row["latitude"],
                longitude=row["longitude"],
                status=row["status"],
            )
            for row in self._query("SELECT * FROM charity_boxes ORDER BY rowid")
        ]
