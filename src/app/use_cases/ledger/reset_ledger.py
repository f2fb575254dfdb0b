"""ResetLedger Use Case"""

from src.libs.result import Result, Return
from src.app.repositories.ledger_store import LedgerStore
from .dtos import ClockDTO


class ResetLedger:
    """
    Use Case: Clear all ledger data

    Customers, credits, payments, reminders and history are emptied
    together. The current date is kept.
    """

    def __init__(self, store: LedgerStore):
        self.store = store

    def execute(self) -> Result[ClockDTO]:
        self.store.reset()
        return Return.ok(ClockDTO(today=self.store.clock.today))
