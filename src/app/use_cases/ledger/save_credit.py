"""SaveCredit Use Case

Records credit extended to a customer, or edits an existing credit entry.
"""

import logging
from pydantic import ValidationError
from src.libs.result import Result, Return, Error
from src.app.repositories.ledger_store import LedgerStore
from src.domain.credit_entry import CreditEntry
from src.domain.history_entry import HistoryEntry, HistoryType
from .aggregation import limit_exceeded
from .dtos import SaveCreditCommandDTO, SaveCreditResponseDTO

logger = logging.getLogger(__name__)


class SaveCredit:
    """
    Use Case: Add or update a credit entry

    Business Rules:
    1. An id that matches an existing entry updates it in place
       (reminder_sent is kept); otherwise a new entry is appended
    2. Amount must be finite and > 0, issue and due dates must parse
    3. The customer must exist unless enforce_customer_reference is off
    4. The credit limit is a soft ceiling: a breach is reported in the
       response but never blocks the write
    5. Inserts append a Credit history entry

    Flow:
    1. Resolve the customer reference
    2. Build and validate the entry
    3. Project the balance against the credit limit
    4. Store the entry (and history on insert)
    """

    def __init__(self, store: LedgerStore, enforce_customer_reference: bool = True):
        self.store = store
        self.enforce_customer_reference = enforce_customer_reference

    def execute(self, command: SaveCreditCommandDTO) -> Result[SaveCreditResponseDTO]:
        # Step 1: Customer reference
        if self.enforce_customer_reference and not self.store.has_customer(command.customer_id):
            logger.warning(f"Rejected credit for unknown customer {command.customer_id}")
            return Return.err(
                Error(
                    code="CUSTOMER_NOT_FOUND",
                    message=f"Customer {command.customer_id} not found",
                )
            )

        # Step 2: Build entry
        existing = self.store.get_credit(command.id) if command.id is not None else None
        try:
            credit = CreditEntry(
                id=existing.id if existing else self.store.next_credit_id(),
                customer_id=command.customer_id,
                amount=command.amount,
                issue_date=command.issue_date,
                due_date=command.due_date,
                remarks=command.remarks if command.remarks is not None else "",
                reminder_sent=existing.reminder_sent if existing else False,
            )
        except ValidationError as e:
            logger.warning(f"Rejected credit form: {e.error_count()} invalid field(s)")
            return Return.err(
                Error(
                    code="VALIDATION_FAILED",
                    message="Customer, a finite amount, issue date and due date are required",
                    reason=str(e),
                )
            )

        # Step 3: Soft limit check, before the write so the projection
        # does not count the new amount twice
        exceeded = limit_exceeded(
            self.store,
            credit.customer_id,
            credit.amount,
            excluding_credit_id=existing.id if existing else None,
        )
        if exceeded:
            logger.warning(
                f"Credit {credit.id} takes customer {credit.customer_id} above the credit limit"
            )

        # Step 4: Store
        if existing:
            self.store.replace_credit(credit)
            logger.info(f"Updated credit {credit.id} for customer {credit.customer_id}")
            return Return.ok(
                SaveCreditResponseDTO(credit=credit, created=False, limit_exceeded=exceeded)
            )

        self.store.add_credit(credit)
        self.store.append_history(
            HistoryEntry(
                timestamp=self.store.clock.timestamp(),
                customer_id=credit.customer_id,
                type=HistoryType.CREDIT,
                amount=credit.amount,
                marker=credit.remarks or "Credit",
            )
        )
        logger.info(
            f"Added credit {credit.id} for customer {credit.customer_id}: "
            f"{credit.amount} due {credit.due_date.isoformat()}"
        )
        return Return.ok(SaveCreditResponseDTO(credit=credit, created=True, limit_exceeded=exceeded))
