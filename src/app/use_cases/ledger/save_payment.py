"""SavePayment Use Case

Records a payment received from a customer, or edits an existing one.
"""

import logging
from pydantic import ValidationError
from src.libs.result import Result, Return, Error
from src.app.repositories.ledger_store import LedgerStore
from src.domain.payment_entry import PaymentEntry
from src.domain.history_entry import HistoryEntry, HistoryType
from .dtos import SavePaymentCommandDTO, SavePaymentResponseDTO

logger = logging.getLogger(__name__)


class SavePayment:
    """
    Use Case: Add or update a payment entry

    Business Rules:
    1. Same update-or-insert rule as SaveCredit
    2. Amount must be finite and > 0, payment date must parse
    3. Overpayment is allowed and simply makes the balance negative
    4. Inserts append a Payment history entry
    """

    def __init__(self, store: LedgerStore, enforce_customer_reference: bool = True):
        self.store = store
        self.enforce_customer_reference = enforce_customer_reference

    def execute(self, command: SavePaymentCommandDTO) -> Result[SavePaymentResponseDTO]:
        if self.enforce_customer_reference and not self.store.has_customer(command.customer_id):
            logger.warning(f"Rejected payment for unknown customer {command.customer_id}")
            return Return.err(
                Error(
                    code="CUSTOMER_NOT_FOUND",
                    message=f"Customer {command.customer_id} not found",
                )
            )

        existing = self.store.get_payment(command.id) if command.id is not None else None
        try:
            payment = PaymentEntry(
                id=existing.id if existing else self.store.next_payment_id(),
                customer_id=command.customer_id,
                amount=command.amount,
                payment_date=command.payment_date,
                payment_type=command.payment_type or "Partial",
                method=command.method or "Cash",
                note=command.note if command.note is not None else "",
            )
        except ValidationError as e:
            logger.warning(f"Rejected payment form: {e.error_count()} invalid field(s)")
            return Return.err(
                Error(
                    code="VALIDATION_FAILED",
                    message="Customer, a finite amount and a payment date are required",
                    reason=str(e),
                )
            )

        if existing:
            self.store.replace_payment(payment)
            logger.info(f"Updated payment {payment.id} for customer {payment.customer_id}")
            return Return.ok(SavePaymentResponseDTO(payment=payment, created=False))

        self.store.add_payment(payment)
        self.store.append_history(
            HistoryEntry(
                timestamp=self.store.clock.timestamp(),
                customer_id=payment.customer_id,
                type=HistoryType.PAYMENT,
                amount=payment.amount,
                marker=payment.payment_type,
            )
        )
        logger.info(f"Added payment {payment.id} for customer {payment.customer_id}: {payment.amount}")
        return Return.ok(SavePaymentResponseDTO(payment=payment, created=True))
