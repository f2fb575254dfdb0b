"""Shared fixtures for unit tests

The ledger clock is pinned to 2026-01-19 09:05 so day counts are stable.
"""

import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal

from src.adapter.repositories.in_memory_ledger_store import InMemoryLedgerStore
from src.domain.clock import Clock
from src.domain.customer import Customer
from src.domain.credit_entry import CreditEntry
from src.domain.payment_entry import PaymentEntry

TODAY = date(2026, 1, 19)


@pytest.fixture
def clock():
    """Clock pinned to TODAY with a fixed wall-clock time"""
    return Clock(TODAY, time_source=lambda: datetime(2026, 1, 19, 9, 5))


@pytest.fixture
def store(clock):
    """Empty in-memory ledger store"""
    return InMemoryLedgerStore(clock)


@pytest.fixture
def add_customer(store):
    """Insert a customer directly into the store"""
    def _add(customer_id: int, credit_limit="5000", created_date: date = date(2026, 1, 1), name=None):
        return store.add_customer(
            Customer(
                id=customer_id,
                name=name or f"Customer {customer_id}",
                contact="555-0000",
                credit_limit=Decimal(credit_limit),
                created_date=created_date,
            )
        )
    return _add


@pytest.fixture
def add_credit(store):
    """Insert a credit entry directly into the store"""
    def _add(customer_id: int, amount, due_date: date, credit_id=None):
        return store.add_credit(
            CreditEntry(
                id=credit_id or store.next_credit_id(),
                customer_id=customer_id,
                amount=Decimal(str(amount)),
                issue_date=due_date - timedelta(days=7),
                due_date=due_date,
            )
        )
    return _add


@pytest.fixture
def add_payment(store):
    """Insert a payment entry directly into the store"""
    def _add(customer_id: int, amount, payment_date: date = TODAY):
        return store.add_payment(
            PaymentEntry(
                id=store.next_payment_id(),
                customer_id=customer_id,
                amount=Decimal(str(amount)),
                payment_date=payment_date,
            )
        )
    return _add
