"""GetCustomerOverview Use Case

Retrieves one customer's derived totals and risk rating.
"""

from src.libs.result import Result, Return, Error
from src.app.repositories.ledger_store import LedgerStore
from .aggregation import customer_summary
from .dtos import CustomerSummaryDTO


class GetCustomerOverview:
    """
    Use Case: Single customer overview

    The aggregation functions fold unknown ids to zeros; this use case
    reports them as CUSTOMER_NOT_FOUND instead so the API can answer 404.
    """

    def __init__(self, store: LedgerStore):
        self.store = store

    def execute(self, customer_id: int) -> Result[CustomerSummaryDTO]:
        customer = self.store.get_customer(customer_id)
        if customer is None:
            return Return.err(
                Error(
                    code="CUSTOMER_NOT_FOUND",
                    message=f"Customer {customer_id} not found",
                )
            )

        return Return.ok(customer_summary(self.store, customer))
