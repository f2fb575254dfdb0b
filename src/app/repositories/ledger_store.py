"""Ledger Store Interface

Defines the contract for the collections every ledger operation reads and
writes.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.clock import Clock
from src.domain.customer import Customer
from src.domain.credit_entry import CreditEntry
from src.domain.payment_entry import PaymentEntry
from src.domain.reminder_record import ReminderRecord
from src.domain.history_entry import HistoryEntry


class LedgerStore(ABC):
    """
    Store interface for ledger collections and the simulated clock

    Lookups return None for unknown ids instead of raising, so callers
    can fall back to showing the raw id.
    """

    clock: Clock

    @abstractmethod
    def customers(self) -> List[Customer]:
        """All customers in insertion order"""
        pass

    @abstractmethod
    def credits(self, customer_id: Optional[int] = None) -> List[CreditEntry]:
        """
        Credit entries in insertion order

        Args:
            customer_id: If given, only entries for this customer
        """
        pass

    @abstractmethod
    def payments(self, customer_id: Optional[int] = None) -> List[PaymentEntry]:
        """
        Payment entries in insertion order

        Args:
            customer_id: If given, only entries for this customer
        """
        pass

    @abstractmethod
    def reminders(self) -> List[ReminderRecord]:
        pass

    @abstractmethod
    def history(self, customer_id: Optional[int] = None) -> List[HistoryEntry]:
        pass

    @abstractmethod
    def get_customer(self, customer_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    def get_credit(self, credit_id: int) -> Optional[CreditEntry]:
        pass

    @abstractmethod
    def get_payment(self, payment_id: int) -> Optional[PaymentEntry]:
        pass

    @abstractmethod
    def get_reminder(self, customer_id: int) -> Optional[ReminderRecord]:
        pass

    @abstractmethod
    def next_customer_id(self) -> int:
        """Max existing customer id + 1 (1 for an empty collection)"""
        pass

    @abstractmethod
    def next_credit_id(self) -> int:
        pass

    @abstractmethod
    def next_payment_id(self) -> int:
        pass

    @abstractmethod
    def add_customer(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    def add_credit(self, credit: CreditEntry) -> CreditEntry:
        pass

    @abstractmethod
    def add_payment(self, payment: PaymentEntry) -> PaymentEntry:
        pass

    @abstractmethod
    def save_reminder(self, reminder: ReminderRecord) -> ReminderRecord:
        """Insert the customer's reminder record or replace the existing one"""
        pass

    @abstractmethod
    def append_history(self, entry: HistoryEntry) -> HistoryEntry:
        pass

    @abstractmethod
    def replace_customer(self, customer: Customer) -> Customer:
        """
        Replace the stored customer with the same id

        Raises:
            KeyError: No customer with that id
        """
        pass

    @abstractmethod
    def replace_credit(self, credit: CreditEntry) -> CreditEntry:
        pass

    @abstractmethod
    def replace_payment(self, payment: PaymentEntry) -> PaymentEntry:
        pass

    @abstractmethod
    def reset(self) -> None:
        """Clear every collection. The clock keeps its date."""
        pass

    def customer_label(self, customer_id: int) -> str:
        """Customer name, or the raw id when the customer is unknown"""
        customer = self.get_customer(customer_id)
        return customer.name if customer else str(customer_id)

    def has_customer(self, customer_id) -> bool:
        """
        Whether customer_id names a stored customer

        Accepts raw form values; anything that is not an integer id is False.
        """
        if customer_id is None or isinstance(customer_id, bool):
            return False
        try:
            return self.get_customer(int(customer_id)) is not None
        except (TypeError, ValueError):
            return False
