"""ToggleReminder Use Case

Marks a credit entry's reminder as sent or not sent.
"""

import logging
from datetime import timedelta
from src.libs.result import Result, Return, Error
from src.app.repositories.ledger_store import LedgerStore
from src.domain.reminder_record import ReminderRecord, ReminderStatus
from .dtos import ToggleReminderResponseDTO

logger = logging.getLogger(__name__)


class ToggleReminder:
    """
    Use Case: Flip the reminder flag of a credit entry

    Business Rules:
    1. reminder_sent is inverted
    2. When it becomes sent, the customer's reminder record is created or
       updated: last_sent = today, count + 1, status Sent, next reminder
       planned reminder_interval_days later
    3. Clearing the flag leaves the reminder record as it is
    """

    def __init__(self, store: LedgerStore, reminder_interval_days: int = 7):
        self.store = store
        self.reminder_interval_days = reminder_interval_days

    def execute(self, credit_id: int) -> Result[ToggleReminderResponseDTO]:
        credit = self.store.get_credit(credit_id)
        if credit is None:
            return Return.err(
                Error(
                    code="CREDIT_NOT_FOUND",
                    message=f"Credit entry {credit_id} not found",
                )
            )

        credit.reminder_sent = not credit.reminder_sent
        reminder = self.store.get_reminder(credit.customer_id)

        if credit.reminder_sent:
            today = self.store.clock.today
            reminder = self.store.save_reminder(
                ReminderRecord(
                    customer_id=credit.customer_id,
                    last_sent=today,
                    count=(reminder.count if reminder else 0) + 1,
                    next_scheduled=today + timedelta(days=self.reminder_interval_days),
                    status=ReminderStatus.SENT,
                )
            )
            logger.info(
                f"Reminder sent for credit {credit.id} "
                f"(customer {credit.customer_id}, total {reminder.count})"
            )
        else:
            logger.info(f"Reminder flag cleared for credit {credit.id}")

        return Return.ok(ToggleReminderResponseDTO(credit=credit, reminder=reminder))
