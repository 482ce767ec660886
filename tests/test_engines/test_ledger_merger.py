"""Tests for the merged aid ledger."""

from datetime import date
from decimal import Decimal

import pytest

from aidpanel.engines.ledger_merger import LedgerMerger
from aidpanel.models.enums import LedgerKind, PaymentPurpose
from aidpanel.models.records import CashPayment, InKindTransaction


@pytest.fixture
def merger() -> LedgerMerger:
    return LedgerMerger()


class TestMerge:
    def test_newer_in_kind_precedes_older_cash(self, merger, aid_payment, rice_transaction, sample_people, sample_products):
        entries = merger.merge([aid_payment], [rice_transaction], sample_people, sample_products)
        assert [e.kind for e in entries] == [LedgerKind.IN_KIND, LedgerKind.CASH]
        assert entries[0].amount_display == "10 kg"
        assert entries[0].description == "Pirinç"
        assert entries[1].amount_display == "₺500,00"

    def test_missing_person_resolves_to_fallback(self, merger, sample_products):
        transaction = InKindTransaction(
            id="30",
            person_id="999",
            product_id="u1",
            quantity=Decimal("1"),
            unit="kg",
            transaction_date=date(2024, 6, 5),
        )
        entries = merger.merge([], [transaction], [], sample_products)
        assert len(entries) == 1
        assert entries[0].person_name == "Bilinmeyen Kişi"

    def test_dates_are_non_increasing(self, merger, sample_payments, sample_transactions, sample_people, sample_products):
        entries = merger.merge(sample_payments, sample_transactions, sample_people, sample_products)
        dates = [e.date for e in entries]
        assert all(a >= b for a, b in zip(dates, dates[1:]))

    def test_counts_reconcile(self, merger, sample_payments, sample_transactions, sample_people, sample_products):
        entries = merger.merge(sample_payments, sample_transactions, sample_people, sample_products)
        cash = [e for e in entries if e.kind == LedgerKind.CASH]
        in_kind = [e for e in entries if e.kind == LedgerKind.IN_KIND]
        # one of the four payments is an expense
        assert len(cash) == 3
        assert len(in_kind) == len(sample_transactions)
        assert len(entries) == len(cash) + len(in_kind)

    def test_same_date_keeps_cash_before_in_kind(self, merger, sample_payments, sample_transactions, sample_people, sample_products):
        entries = merger.merge(sample_payments, sample_transactions, sample_people, sample_products)
        assert [e.id for e in entries] == [
            "cash-13",
            "inkind-20",
            "cash-10",
            "inkind-22",
            "inkind-21",
            "cash-12",
        ]

    def test_expense_payments_never_listed(self, merger):
        rent = CashPayment(
            id="1",
            person_name="Ofis",
            purpose=PaymentPurpose.EXPENSE_PAYMENT,
            amount=Decimal("12000"),
            payment_date=date(2024, 6, 1),
        )
        assert merger.merge([rent], [], [], []) == []

    def test_merge_is_idempotent(self, merger, sample_payments, sample_transactions, sample_people, sample_products):
        first = merger.merge(sample_payments, sample_transactions, sample_people, sample_products)
        second = merger.merge(sample_payments, sample_transactions, sample_people, sample_products)
        assert first == second


class TestFilter:
    @pytest.fixture
    def entries(self, merger, sample_payments, sample_transactions, sample_people, sample_products):
        return merger.merge(sample_payments, sample_transactions, sample_people, sample_products)

    def test_no_filters_returns_everything(self, entries):
        assert LedgerMerger.filter(entries) == entries

    def test_kind_filter(self, entries):
        cash = LedgerMerger.filter(entries, kind=LedgerKind.CASH)
        assert len(cash) == 3
        assert all(e.kind == LedgerKind.CASH for e in cash)
        in_kind = LedgerMerger.filter(entries, kind="Ayni")
        assert len(in_kind) == 3

    def test_search_matches_person_case_insensitively(self, entries):
        found = LedgerMerger.filter(entries, search="AYŞE")
        assert {e.id for e in found} == {"cash-10", "inkind-20"}

    def test_search_matches_description(self, entries):
        found = LedgerMerger.filter(entries, search="battaniye")
        assert [e.id for e in found] == ["inkind-21"]

    def test_filters_compose(self, entries):
        found = LedgerMerger.filter(entries, kind=LedgerKind.CASH, search="ayşe")
        assert [e.id for e in found] == ["cash-10"]

    def test_filter_keeps_order_and_input(self, entries):
        before = list(entries)
        found = LedgerMerger.filter(entries, kind=LedgerKind.IN_KIND)
        assert entries == before
        assert [e.id for e in found] == ["inkind-20", "inkind-22", "inkind-21"]

    def test_no_match(self, entries):
        assert LedgerMerger.filter(entries, search="yok böyle biri") == []

    def test_search_folds_plain_capital_i(self, merger):
        payment = CashPayment(
            id="40",
            person_name="Ibrahim Yilmaz",
            purpose=PaymentPurpose.AID_PAYMENT,
            amount=Decimal("200"),
            payment_date=date(2024, 6, 4),
        )
        entries = merger.merge([payment], [], [], [])
        assert [e.person_name for e in LedgerMerger.filter(entries, search="ibrahim")] == ["Ibrahim Yilmaz"]
        assert [e.person_name for e in LedgerMerger.filter(entries, search="Ibrahim")] == ["Ibrahim Yilmaz"]
