"""Ledger normalizers: cash payments and in-kind aid transactions."""

import logging

from aidpanel.formatting import format_currency, format_quantity
from aidpanel.models.enums import PaymentPurpose
from aidpanel.models.records import CashPayment, InKindTransaction, Person, Product
from aidpanel.models.views import CashLedgerEntry, InKindLedgerEntry
from aidpanel.normalization.lookups import UNKNOWN_PERSON, LookupMap

logger = logging.getLogger(__name__)

# Payment purposes shown in the aid ledger. Salaries, rent and other
# expense or income payments are never listed there.
AID_PAYMENT_PURPOSES = frozenset({
    PaymentPurpose.AID_PAYMENT,
    PaymentPurpose.SCHOLARSHIP_PAYMENT,
    PaymentPurpose.ORPHAN_SUPPORT,
    PaymentPurpose.ELDER_SUPPORT,
})


def normalize_cash_payment(payment: CashPayment) -> CashLedgerEntry | None:
    """Map an aid payment to a ledger entry; other purposes yield ``None``."""
    if payment.purpose not in AID_PAYMENT_PURPOSES:
        return None
    return CashLedgerEntry(
        id=f"cash-{payment.id}",
        person_name=payment.person_name.strip() or UNKNOWN_PERSON,
        description=payment.description,
        amount_display=format_currency(payment.amount, payment.currency),
        date=payment.payment_date,
        amount=payment.amount,
        currency=payment.currency,
    )


def normalize_in_kind(
    transaction: InKindTransaction,
    people: LookupMap[Person],
    products: LookupMap[Product],
) -> InKindLedgerEntry:
    """Map an in-kind transaction, resolving person and product names.

    Dangling references resolve to the lookup fallback label; the entry is
    always produced.
    """
    if transaction.person_id not in people:
        logger.debug("In-kind %s references unknown person %s", transaction.id, transaction.person_id)
    if transaction.product_id not in products:
        logger.debug("In-kind %s references unknown product %s", transaction.id, transaction.product_id)
    return InKindLedgerEntry(
        id=f"inkind-{transaction.id}",
        person_name=people.resolve(transaction.person_id),
        description=products.resolve(transaction.product_id),
        amount_display=format_quantity(transaction.quantity, transaction.unit),
        date=transaction.transaction_date,
        quantity=transaction.quantity,
        unit=transaction.unit,
    )
