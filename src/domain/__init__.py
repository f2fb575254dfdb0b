from .base import BaseModel
from .clock import Clock
from .customer import Customer
from .credit_entry import CreditEntry
from .payment_entry import PaymentEntry
from .reminder_record import ReminderRecord, ReminderStatus
from .history_entry import HistoryEntry, HistoryType

__all__ = [
    "BaseModel",
    "Clock",
    "Customer",
    "CreditEntry",
    "PaymentEntry",
    "ReminderRecord",
    "ReminderStatus",
    "HistoryEntry",
    "HistoryType",
]
