"""Unit tests for SaveCredit use case"""

import pytest
from datetime import date
from decimal import Decimal

from src.app.use_cases.ledger.save_credit import SaveCredit
from src.app.use_cases.ledger.dtos import SaveCreditCommandDTO
from src.domain.history_entry import HistoryType


def _command(**overrides):
    data = {
        "customer_id": 1,
        "amount": "450",
        "issue_date": "2026-01-19",
        "due_date": "2026-02-02",
        "remarks": "Net 14",
    }
    data.update(overrides)
    return SaveCreditCommandDTO(**data)


class TestSaveCreditInsert:
    """Test inserting credit entries"""

    @pytest.fixture
    def use_case(self, store):
        return SaveCredit(store)

    def test_insert_assigns_next_id_and_appends_history(self, use_case, store, add_customer, add_credit):
        """
        Given: Existing credit ids 1 to 4
        When: A credit is saved without an id
        Then: It gets id 5 and a Credit history entry is appended
        """
        # Arrange
        add_customer(1)
        for _ in range(4):
            add_credit(1, 10, date(2026, 2, 1))

        # Act
        result = use_case.execute(_command())

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.created is True
        assert response.credit.id == 5
        assert response.credit.reminder_sent is False
        assert len(store.credits()) == 5

        history = store.history()
        assert len(history) == 1
        assert history[0].type == HistoryType.CREDIT
        assert history[0].amount == Decimal("450")
        assert history[0].marker == "Net 14"
        assert history[0].customer_id == 1

    def test_unknown_customer_is_rejected(self, use_case, store):
        result = use_case.execute(_command(customer_id=99))

        assert result.is_err()
        assert result.error.code == "CUSTOMER_NOT_FOUND"
        assert store.credits() == []
        assert store.history() == []

    def test_missing_customer_id_is_rejected(self, use_case, store):
        result = use_case.execute(_command(customer_id=None))

        assert result.is_err()
        assert store.credits() == []

    def test_unknown_customer_accepted_when_not_enforced(self, store):
        use_case = SaveCredit(store, enforce_customer_reference=False)

        result = use_case.execute(_command(customer_id=99))

        assert result.is_ok()
        assert store.credits()[0].customer_id == 99
        assert result.value.limit_exceeded is False

    @pytest.mark.parametrize(
        "overrides",
        [
            {"amount": None},
            {"amount": "0"},
            {"amount": "Infinity"},
            {"amount": "ten"},
            {"due_date": None},
            {"due_date": "2026-02-30"},
            {"issue_date": None},
            {"issue_date": "yesterday"},
        ],
    )
    def test_invalid_input_is_a_no_op(self, use_case, store, add_customer, overrides):
        add_customer(1)

        result = use_case.execute(_command(**overrides))

        assert result.is_err()
        assert result.error.code == "VALIDATION_FAILED"
        assert store.credits() == []
        assert store.history() == []


class TestSaveCreditUpdate:
    """Test editing credit entries"""

    @pytest.fixture
    def use_case(self, store):
        return SaveCredit(store)

    def test_update_in_place_keeps_reminder_flag(self, use_case, store, add_customer, add_credit):
        # Arrange
        add_customer(1)
        add_credit(1, 100, date(2026, 1, 10))
        existing = add_credit(1, 200, date(2026, 1, 12))
        existing.reminder_sent = True

        # Act
        result = use_case.execute(_command(id=existing.id, amount="250"))

        # Assert
        assert result.is_ok()
        assert result.value.created is False
        updated = store.get_credit(existing.id)
        assert updated.amount == Decimal("250")
        assert updated.due_date == date(2026, 2, 2)
        assert updated.reminder_sent is True
        assert len(store.credits()) == 2
        assert store.history() == []


class TestSaveCreditLimitWarning:
    """The credit limit is a warning, never a gate"""

    @pytest.fixture
    def use_case(self, store):
        return SaveCredit(store)

    @pytest.fixture
    def customer(self, add_customer, add_credit):
        add_customer(1, credit_limit="1000")
        return add_credit(1, 700, date(2026, 2, 1))

    def test_at_limit_no_warning(self, use_case, customer):
        result = use_case.execute(_command(amount="300"))

        assert result.value.limit_exceeded is False

    def test_over_limit_warns_but_stores(self, use_case, store, customer):
        result = use_case.execute(_command(amount="301"))

        assert result.is_ok()
        assert result.value.limit_exceeded is True
        assert len(store.credits()) == 2

    def test_edit_projects_without_old_amount(self, use_case, customer):
        assert use_case.execute(_command(id=customer.id, amount="1000")).value.limit_exceeded is False
        assert use_case.execute(_command(id=customer.id, amount="1001")).value.limit_exceeded is True
