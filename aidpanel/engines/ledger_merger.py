"""Merged aid ledger: cash aid payments and in-kind transactions."""

import logging
from collections.abc import Iterable, Sequence

from aidpanel.engines.filters import FilterEngine, contains_text, equals
from aidpanel.models.enums import LedgerKind
from aidpanel.models.records import CashPayment, InKindTransaction, Person, Product
from aidpanel.models.views import LedgerEntry
from aidpanel.normalization.ledger import normalize_cash_payment, normalize_in_kind
from aidpanel.normalization.lookups import person_names, product_names

logger = logging.getLogger(__name__)


class LedgerMerger:
    """Unions cash and in-kind aid into one ledger ordered newest first."""

    def merge(
        self,
        payments: Iterable[CashPayment],
        transactions: Iterable[InKindTransaction],
        people: Iterable[Person],
        products: Iterable[Product],
    ) -> list[LedgerEntry]:
        """Normalize both kinds, concatenate, then sort the combined list once.

        The sort is stable, so same-date entries keep concatenation order:
        cash entries before in-kind entries.
        """
        person_lookup = person_names(people)
        product_lookup = product_names(products)

        cash_entries = [
            entry for entry in (normalize_cash_payment(p) for p in payments) if entry is not None
        ]
        in_kind_entries = [
            normalize_in_kind(t, person_lookup, product_lookup) for t in transactions
        ]
        logger.debug(
            "Merging %d cash and %d in-kind ledger entries", len(cash_entries), len(in_kind_entries)
        )
        combined: list[LedgerEntry] = [*cash_entries, *in_kind_entries]
        return sorted(combined, key=lambda entry: entry.date, reverse=True)

    @staticmethod
    def filter(
        entries: Sequence[LedgerEntry],
        kind: LedgerKind | str = "all",
        search: str = "",
    ) -> list[LedgerEntry]:
        """Narrow a merged ledger by kind and by person/description text.

        Returns a new list; ``entries`` is left untouched.
        """
        engine: FilterEngine[LedgerEntry] = FilterEngine(
            equals(kind, lambda e: e.kind),
            contains_text(search, lambda e: e.person_name, lambda e: e.description),
        )
        return engine.apply(entries)
