"""SaveCustomer Use Case

Adds a new customer or updates an existing one in place.
"""

import logging
from decimal import Decimal
from pydantic import ValidationError
from src.libs.result import Result, Return, Error
from src.app.repositories.ledger_store import LedgerStore
from src.domain.customer import Customer
from src.domain.history_entry import HistoryEntry, HistoryType
from .dtos import SaveCustomerCommandDTO, SaveCustomerResponseDTO

logger = logging.getLogger(__name__)


class SaveCustomer:
    """
    Use Case: Add or update a customer

    Business Rules:
    1. An id that matches an existing customer updates name, contact,
       address, credit limit and notes; id and created_date are kept
    2. Any other command inserts a customer with id = max id + 1
    3. Name and contact are required, credit limit must be finite and >= 0
    4. Invalid input leaves the store untouched and returns VALIDATION_FAILED
    5. Inserts append a Customer history entry
    """

    def __init__(self, store: LedgerStore):
        self.store = store

    def execute(self, command: SaveCustomerCommandDTO) -> Result[SaveCustomerResponseDTO]:
        existing = self.store.get_customer(command.id) if command.id is not None else None
        fields = {
            "name": command.name,
            "contact": command.contact,
            "address": command.address if command.address is not None else "",
            "credit_limit": command.credit_limit,
            "notes": command.notes if command.notes is not None else "",
        }

        try:
            if existing:
                customer = Customer(**{**existing.model_dump(), **fields})
            else:
                customer = Customer(
                    id=self.store.next_customer_id(),
                    created_date=self.store.clock.today,
                    **fields,
                )
        except ValidationError as e:
            logger.warning(f"Rejected customer form: {e.error_count()} invalid field(s)")
            return Return.err(
                Error(
                    code="VALIDATION_FAILED",
                    message="Customer name, contact and a non-negative credit limit are required",
                    reason=str(e),
                )
            )

        if existing:
            self.store.replace_customer(customer)
            logger.info(f"Updated customer {customer.id} ({customer.name})")
            return Return.ok(SaveCustomerResponseDTO(customer=customer, created=False))

        self.store.add_customer(customer)
        self.store.append_history(
            HistoryEntry(
                timestamp=self.store.clock.timestamp(),
                customer_id=customer.id,
                type=HistoryType.CUSTOMER,
                amount=Decimal("0"),
                marker="New customer",
            )
        )
        logger.info(f"Added customer {customer.id} ({customer.name})")
        return Return.ok(SaveCustomerResponseDTO(customer=customer, created=True))
