"""In-memory implementation of LedgerStore

Collections live in process memory and are lost on restart.
"""

import logging
from typing import List, Optional, TypeVar
from src.app.repositories.ledger_store import LedgerStore
from src.domain.clock import Clock
from src.domain.customer import Customer
from src.domain.credit_entry import CreditEntry
from src.domain.payment_entry import PaymentEntry
from src.domain.reminder_record import ReminderRecord
from src.domain.history_entry import HistoryEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _next_id(records: list) -> int:
    return max((r.id for r in records), default=0) + 1


def _replace_by_id(records: List[T], record: T, kind: str) -> T:
    for idx, existing in enumerate(records):
        if existing.id == record.id:
            records[idx] = record
            return record
    raise KeyError(f"{kind} {record.id} not found")


class InMemoryLedgerStore(LedgerStore):
    """
    List-backed LedgerStore

    Features:
    - Insertion-ordered collections
    - Linear id lookups (collections are small)
    - reset() clears data but keeps the clock
    """

    def __init__(self, clock: Clock):
        self.clock = clock
        self._customers: List[Customer] = []
        self._credits: List[CreditEntry] = []
        self._payments: List[PaymentEntry] = []
        self._reminders: List[ReminderRecord] = []
        self._history: List[HistoryEntry] = []

    def customers(self) -> List[Customer]:
        return list(self._customers)

    def credits(self, customer_id: Optional[int] = None) -> List[CreditEntry]:
        if customer_id is None:
            return list(self._credits)
        return [c for c in self._credits if c.customer_id == customer_id]

    def payments(self, customer_id: Optional[int] = None) -> List[PaymentEntry]:
        if customer_id is None:
            return list(self._payments)
        return [p for p in self._payments if p.customer_id == customer_id]

    def reminders(self) -> List[ReminderRecord]:
        return list(self._reminders)

    def history(self, customer_id: Optional[int] = None) -> List[HistoryEntry]:
        if customer_id is None:
            return list(self._history)
        return [h for h in self._history if h.customer_id == customer_id]

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        return next((c for c in self._customers if c.id == customer_id), None)

    def get_credit(self, credit_id: int) -> Optional[CreditEntry]:
        return next((c for c in self._credits if c.id == credit_id), None)

    def get_payment(self, payment_id: int) -> Optional[PaymentEntry]:
        return next((p for p in self._payments if p.id == payment_id), None)

    def get_reminder(self, customer_id: int) -> Optional[ReminderRecord]:
        return next((r for r in self._reminders if r.customer_id == customer_id), None)

    def next_customer_id(self) -> int:
        return _next_id(self._customers)

    def next_credit_id(self) -> int:
        return _next_id(self._credits)

    def next_payment_id(self) -> int:
        return _next_id(self._payments)

    def add_customer(self, customer: Customer) -> Customer:
        self._customers.append(customer)
        return customer

    def add_credit(self, credit: CreditEntry) -> CreditEntry:
        self._credits.append(credit)
        return credit

    def add_payment(self, payment: PaymentEntry) -> PaymentEntry:
        self._payments.append(payment)
        return payment

    def save_reminder(self, reminder: ReminderRecord) -> ReminderRecord:
        for idx, existing in enumerate(self._reminders):
            if existing.customer_id == reminder.customer_id:
                self._reminders[idx] = reminder
                return reminder
        self._reminders.append(reminder)
        return reminder

    def append_history(self, entry: HistoryEntry) -> HistoryEntry:
        self._history.append(entry)
        return entry

    def replace_customer(self, customer: Customer) -> Customer:
        return _replace_by_id(self._customers, customer, "Customer")

    def replace_credit(self, credit: CreditEntry) -> CreditEntry:
        return _replace_by_id(self._credits, credit, "Credit entry")

    def replace_payment(self, payment: PaymentEntry) -> PaymentEntry:
        return _replace_by_id(self._payments, payment, "Payment entry")

    def reset(self) -> None:
        self._customers.clear()
        self._credits.clear()
        self._payments.clear()
        self._reminders.clear()
        self._history.clear()
        logger.info(f"Ledger store reset (clock stays at {self.clock.today.isoformat()})")
