"""JSON snapshot adapter: loads every source collection from one file.

The file is a JSON object keyed by collection name (``events``,
``projects``, ``cases``, ``cash_payments``, ``in_kind_transactions``,
``products``, ``people``, ``financial_records``, ``messages``,
``applications``, ``donations``, ``charity_boxes``), each holding a list of
records whose keys follow the model field names. Ids may be numbers or
strings. Optional dates that cannot be parsed are imported as missing.
"""

import json
import logging
from collections.abc import Callable, Iterable
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any

from aidpanel.exceptions import SnapshotImportError
from aidpanel.ingestion.base import BaseAdapter, Snapshot
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
from aidpanel.normalization.ledger import AID_PAYMENT_PURPOSES

logger = logging.getLogger(__name__)


class SnapshotAdapter(BaseAdapter):
    """Imports JSON snapshot files into domain models."""

    def parse(self, file_path: Path) -> Snapshot:
        """Read a snapshot file and return typed collections."""
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            raw = json.loads(file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SnapshotImportError(file_path.name, f"invalid JSON: {exc}") from exc
        if not isinstance(raw, dict):
            raise SnapshotImportError(file_path.name, "top level must be an object of collections")

        dispatch = self._dispatch()
        unknown = sorted(set(raw) - set(dispatch))
        if unknown:
            logger.warning("Ignoring unknown collections in %s: %s", file_path.name, ", ".join(unknown))

        snapshot = Snapshot()
        for key, parser in dispatch.items():
            records = raw.get(key) or []
            if not isinstance(records, list):
                raise SnapshotImportError(file_path.name, f"'{key}' must be a list")
            parsed = []
            for index, record in enumerate(records):
                try:
                    parsed.append(parser(record))
                except (KeyError, TypeError, ValueError) as exc:
                    raise SnapshotImportError(file_path.name, f"{key}[{index}]: {exc}") from exc
            setattr(snapshot, key, parsed)
        return snapshot

    def validate(self, data: Snapshot) -> list[str]:
        """Report dangling references and duplicate ids. Nothing here blocks an import."""
        warnings: list[str] = []

        for key, records in data.collections().items():
            warnings.extend(f"{key}: duplicate id {record_id}" for record_id in _repeated_ids(records))

        # Repeated sub-record ids are stored once; the last occurrence wins.
        for project in data.projects:
            warnings.extend(
                f"projects: {project.id} repeats task id {task_id}, keeping the last one"
                for task_id in _repeated_ids(project.tasks)
            )
        for case in data.cases:
            warnings.extend(
                f"cases: {case.id} repeats hearing id {hearing_id}, keeping the last one"
                for hearing_id in _repeated_ids(case.hearings)
            )

        person_ids = {p.id for p in data.people}
        product_ids = {p.id for p in data.products}
        for transaction in data.in_kind_transactions:
            if transaction.person_id not in person_ids:
                warnings.append(
                    f"in_kind_transactions: {transaction.id} references unknown person {transaction.person_id}"
                )
            if transaction.product_id not in product_ids:
                warnings.append(
                    f"in_kind_transactions: {transaction.id} references unknown product {transaction.product_id}"
                )

        non_aid = sum(1 for p in data.cash_payments if p.purpose not in AID_PAYMENT_PURPOSES)
        if non_aid:
            logger.info("%d cash payments are not aid payments and stay out of the aid ledger", non_aid)
        return warnings

    def _dispatch(self) -> dict[str, Callable[[dict], Any]]:
        return {
            "events": self._parse_event,
            "projects": self._parse_project,
            "cases": self._parse_case,
            "cash_payments": self._parse_cash_payment,
            "in_kind_transactions": self._parse_in_kind,
            "products": self._parse_product,
            "people": self._parse_person,
            "financial_records": self._parse_financial_record,
            "messages": self._parse_message,
            "applications": self._parse_application,
            "donations": self._parse_donation,
            "charity_boxes": self._parse_charity_box,
        }

    # --- Parsers ---

    @staticmethod
    def _parse_event(data: dict) -> Event:
        return Event(
            id=_id(data["id"]),
            title=data.get("title", ""),
            event_date=_lenient_date(data.get("event_date")),
            time=data.get("time"),
            location=data.get("location"),
            description=data.get("description"),
            status=data.get("status"),
        )

    @staticmethod
    def _parse_project(data: dict) -> Project:
        tasks = [
            Task(
                id=_id(task["id"]),
                title=task.get("title", ""),
                due_date=_lenient_date(task.get("due_date")),
                status=task.get("status"),
                priority=task.get("priority"),
            )
            for task in data.get("tasks") or []
        ]
        return Project(
            id=_id(data["id"]),
            name=data["name"],
            manager=data.get("manager"),
            status=ProjectStatus(data.get("status", ProjectStatus.PLANNING.value)),
            tasks=tasks,
        )

    @staticmethod
    def _parse_case(data: dict) -> LegalCase:
        hearings = [
            Hearing(
                id=_id(hearing["id"]),
                hearing_date=_lenient_date(hearing.get("hearing_date")),
                time=hearing.get("time"),
                description=hearing.get("description"),
            )
            for hearing in data.get("hearings") or []
        ]
        return LegalCase(
            id=_id(data["id"]),
            case_number=data.get("case_number"),
            subject=data["subject"],
            client=data.get("client", ""),
            status=data.get("status"),
            hearings=hearings,
        )

    @staticmethod
    def _parse_cash_payment(data: dict) -> CashPayment:
        return CashPayment(
            id=_id(data["id"]),
            person_name=data.get("person_name") or "",
            purpose=PaymentPurpose(data["purpose"]),
            amount=_decimal(data["amount"]),
            currency=Currency(data.get("currency", Currency.TRY.value)),
            description=data.get("description") or "",
            payment_date=date.fromisoformat(str(data["payment_date"])[:10]),
            status=data.get("status"),
        )

    @staticmethod
    def _parse_in_kind(data: dict) -> InKindTransaction:
        return InKindTransaction(
            id=_id(data["id"]),
            person_id=_id(data["person_id"]),
            product_id=_id(data["product_id"]),
            quantity=_decimal(data["quantity"]),
            unit=data.get("unit", ""),
            transaction_date=date.fromisoformat(str(data["transaction_date"])[:10]),
            notes=data.get("notes"),
        )

    @staticmethod
    def _parse_product(data: dict) -> Product:
        return Product(
            id=_id(data["id"]),
            name=data["name"],
            unit=data.get("unit"),
            category=data.get("category"),
        )

    @staticmethod
    def _parse_person(data: dict) -> Person:
        nationalities = data.get("nationalities")
        if isinstance(nationalities, str):
            nationalities = [nationalities]
        membership = data.get("membership_type")
        return Person(
            id=_id(data["id"]),
            first_name=data["first_name"],
            last_name=data.get("last_name") or "",
            nationalities=nationalities or [],
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            aid_types_received=data.get("aid_types_received") or [],
            membership_type=MembershipType(membership) if membership else None,
            registration_date=_lenient_date(data.get("registration_date")),
        )

    @staticmethod
    def _parse_financial_record(data: dict) -> FinancialRecord:
        return FinancialRecord(
            id=_id(data["id"]),
            record_date=date.fromisoformat(str(data["record_date"])[:10]),
            direction=FinancialDirection(data["direction"]),
            category=data.get("category"),
            amount=_decimal(data["amount"]),
            description=data.get("description"),
        )

    @staticmethod
    def _parse_message(data: dict) -> Message:
        return Message(
            id=_id(data["id"]),
            channel=MessageChannel(data["channel"]),
            audience=data["audience"],
            recipient_count=int(data.get("recipient_count", 0)),
            title=data.get("title"),
            sent_at=date.fromisoformat(str(data["sent_at"])[:10]),
        )

    @staticmethod
    def _parse_application(data: dict) -> AidApplication:
        requested = data.get("requested_amount")
        return AidApplication(
            id=_id(data["id"]),
            applicant_id=_id(data["applicant_id"]),
            status=ApplicationStatus(data["status"]),
            requested_amount=_decimal(requested) if requested is not None else None,
            applied_at=date.fromisoformat(str(data["applied_at"])[:10]),
        )

    @staticmethod
    def _parse_donation(data: dict) -> Donation:
        return Donation(
            id=_id(data["id"]),
            donor_id=_id(data["donor_id"]),
            amount=_decimal(data["amount"]),
            currency=Currency(data.get("currency", Currency.TRY.value)),
            donation_date=date.fromisoformat(str(data["donation_date"])[:10]),
        )

    @staticmethod
    def _parse_charity_box(data: dict) -> CharityBox:
        return CharityBox(
            id=_id(data["id"]),
            code=data["code"],
            location=data.get("location") or "",
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            status=data.get("status"),
        )


def _repeated_ids(records: Iterable[Any]) -> list[str]:
    seen: set[str] = set()
    repeated: list[str] = []
    for record in records:
        if record.id in seen:
            repeated.append(record.id)
        seen.add(record.id)
    return repeated


def _id(value: Any) -> str:
    return str(value)


def _decimal(value: Any) -> Decimal:
    try:
        return Decimal(str(value))
    except ArithmeticError as exc:
        raise ValueError(f"not a number: {value!r}") from exc


def _lenient_date(value: Any) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        logger.debug("Optional date %r is not ISO formatted, imported as missing", value)
        return None
