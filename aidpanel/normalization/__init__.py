"""Normalization layer: raw source records to canonical view models."""

from aidpanel.normalization.calendar import (
    CalendarNormalizer,
    normalize_event,
    normalize_hearing,
    normalize_task,
)
from aidpanel.normalization.geo import normalize_charity_box, normalize_recipient, normalize_volunteer
from aidpanel.normalization.ledger import AID_PAYMENT_PURPOSES, normalize_cash_payment, normalize_in_kind
from aidpanel.normalization.lookups import (
    UNKNOWN_PERSON,
    UNKNOWN_PRODUCT,
    LookupMap,
    person_names,
    product_names,
)

__all__ = [
    "AID_PAYMENT_PURPOSES",
    "CalendarNormalizer",
    "LookupMap",
    "UNKNOWN_PERSON",
    "UNKNOWN_PRODUCT",
    "normalize_cash_payment",
    "normalize_charity_box",
    "normalize_event",
    "normalize_hearing",
    "normalize_in_kind",
    "normalize_recipient",
    "normalize_task",
    "normalize_volunteer",
    "person_names",
    "product_names",
]
