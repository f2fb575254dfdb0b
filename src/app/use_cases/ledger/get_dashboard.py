"""GetDashboard Use Case

Builds the dashboard read model in one pass over the store.
"""

from src.libs.result import Result, Return
from src.app.repositories.ledger_store import LedgerStore
from .aggregation import (
    DEFAULT_NEW_CUSTOMER_WINDOW_DAYS,
    customer_summaries,
    global_totals,
    past_due_aging,
    upcoming_due_aging,
)
from .dtos import DashboardDTO


class GetDashboard:
    """
    Use Case: Dashboard overview

    Read-only. Combines global totals, both aging views and the customer
    summary table. The two aging views share bucket ranges but measure
    different things: days until due versus days past due.
    """

    def __init__(
        self,
        store: LedgerStore,
        new_customer_window_days: int = DEFAULT_NEW_CUSTOMER_WINDOW_DAYS,
    ):
        self.store = store
        self.new_customer_window_days = new_customer_window_days

    def execute(self) -> Result[DashboardDTO]:
        return Return.ok(
            DashboardDTO(
                today=self.store.clock.today,
                totals=global_totals(self.store, self.new_customer_window_days),
                upcoming_due=upcoming_due_aging(self.store),
                past_due=past_due_aging(self.store),
                customers=customer_summaries(self.store),
            )
        )
