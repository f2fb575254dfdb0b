"""Unit tests for the sample ledger loader"""

from decimal import Decimal

from src.adapter.sample_data import load_sample_ledger
from src.app.use_cases.ledger.aggregation import running_ledger
from src.domain.history_entry import HistoryType


class TestLoadSampleLedger:
    def test_loads_demo_records(self, store):
        load_sample_ledger(store)

        assert [c.name for c in store.customers()] == ["Alice Traders", "Bright Supplies", "Cedar Mart"]
        assert len(store.credits()) == 3
        assert len(store.payments()) == 2
        assert store.get_credit(2).reminder_sent is True

    def test_writes_history_for_every_record(self, store):
        load_sample_ledger(store)

        history = store.history()

        assert len(history) == 8
        assert sum(1 for h in history if h.type == HistoryType.CUSTOMER) == 3
        assert running_ledger(store)[-1].running_balance == Decimal("1100")

    def test_next_ids_follow_sample_ids(self, store):
        load_sample_ledger(store)

        assert store.next_customer_id() == 4
        assert store.next_credit_id() == 4
        assert store.next_payment_id() == 3
