"""Unit tests for AdvanceDate and ResetLedger use cases"""

import pytest
from datetime import date
from decimal import Decimal

from src.app.use_cases.ledger.advance_date import AdvanceDate
from src.app.use_cases.ledger.reset_ledger import ResetLedger
from src.app.use_cases.ledger.aggregation import (
    customer_totals,
    global_totals,
    past_due_aging,
    risk_score,
    upcoming_due_aging,
)


class TestAdvanceDate:
    """Test suite for AdvanceDate use case"""

    def test_advance_one_day(self, store):
        result = AdvanceDate(store).execute()

        assert result.is_ok()
        assert result.value.today == date(2026, 1, 20)
        assert store.clock.today == date(2026, 1, 20)

    def test_advance_several_days(self, store):
        assert AdvanceDate(store).execute(12).value.today == date(2026, 1, 31)

    @pytest.mark.parametrize("days", [0, -3])
    def test_non_positive_days_rejected(self, store, days):
        result = AdvanceDate(store).execute(days)

        assert result.is_err()
        assert result.error.code == "VALIDATION_FAILED"
        assert store.clock.today == date(2026, 1, 19)

    def test_derived_figures_follow_the_clock(self, store, add_customer, add_credit):
        add_customer(1)
        add_credit(1, 250, date(2026, 1, 19))
        assert global_totals(store).overdue_total == Decimal("0")

        AdvanceDate(store).execute()

        assert global_totals(store).overdue_total == Decimal("250")


class TestResetLedger:
    def test_reset_clears_data_and_keeps_date(self, store, add_customer, add_credit, add_payment):
        add_customer(1)
        add_credit(1, 100, date(2026, 1, 1))
        add_payment(1, 40)
        AdvanceDate(store).execute(2)

        result = ResetLedger(store).execute()

        assert result.is_ok()
        assert result.value.today == date(2026, 1, 21)
        totals = global_totals(store)
        assert totals.customer_count == 0
        assert totals.total_credit == 0
        assert totals.overdue_total == 0

    def test_derivations_fold_to_zero_after_reset(self, store, add_customer, add_credit, add_payment):
        # Arrange
        add_customer(1)
        add_credit(1, 400, date(2026, 1, 2))
        add_credit(1, 600, date(2026, 2, 2))
        add_payment(1, 100)

        # Act
        ResetLedger(store).execute()

        # Assert
        totals = customer_totals(store, 1)
        assert totals.total_credit == 0
        assert totals.balance == 0
        assert totals.overdue_amount == 0
        assert totals.max_overdue_days == 0
        assert risk_score(store, 1) == 95
        for buckets in (upcoming_due_aging(store), past_due_aging(store)):
            assert buckets.within7 == buckets.within30 == buckets.over30 == Decimal("0")
