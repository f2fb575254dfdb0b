"""Sample ledger loader

Fills a store with the demo customers, credits and payments from a YAML
fixture. History entries are written for every record so the running
ledger has something to show.
"""

import logging
import os
from decimal import Decimal
from typing import Optional
import yaml

from src.app.repositories.ledger_store import LedgerStore
from src.domain.customer import Customer
from src.domain.credit_entry import CreditEntry
from src.domain.payment_entry import PaymentEntry
from src.domain.history_entry import HistoryEntry, HistoryType

logger = logging.getLogger(__name__)

SAMPLE_LEDGER_PATH = os.path.join(os.path.dirname(__file__), "fixtures", "sample_ledger.yaml")


def load_sample_ledger(store: LedgerStore, path: Optional[str] = None) -> None:
    """
    Append the sample records to store

    Args:
        store: Target store (expected to be empty)
        path: YAML fixture (defaults to the bundled sample_ledger.yaml)
    """
    with open(path or SAMPLE_LEDGER_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()

    for row in data.get("customers", []):
        customer = store.add_customer(Customer(**row))
        store.append_history(
            HistoryEntry(
                timestamp=f"{customer.created_date.isoformat()} 09:00",
                customer_id=customer.id,
                type=HistoryType.CUSTOMER,
                amount=Decimal("0"),
                marker="New customer",
            )
        )

    for row in data.get("credits", []):
        credit = store.add_credit(CreditEntry(**row))
        store.append_history(
            HistoryEntry(
                timestamp=f"{credit.issue_date.isoformat()} 10:00",
                customer_id=credit.customer_id,
                type=HistoryType.CREDIT,
                amount=credit.amount,
                marker=credit.remarks or "Credit",
            )
        )

    for row in data.get("payments", []):
        payment = store.add_payment(PaymentEntry(**row))
        store.append_history(
            HistoryEntry(
                timestamp=f"{payment.payment_date.isoformat()} 15:00",
                customer_id=payment.customer_id,
                type=HistoryType.PAYMENT,
                amount=payment.amount,
                marker=payment.payment_type,
            )
        )

    logger.info(
        f"Loaded sample ledger: {len(store.customers())} customers, "
        f"{len(store.credits())} credits, {len(store.payments())} payments"
    )
