"""AdvanceDate Use Case

Moves the simulated ledger date forward.
"""

import logging
from src.libs.result import Result, Return, Error
from src.app.repositories.ledger_store import LedgerStore
from .dtos import ClockDTO

logger = logging.getLogger(__name__)


class AdvanceDate:
    """
    Use Case: Advance the ledger clock

    The dashboard advances one day at a time, but any positive number of
    days is accepted. Derived figures change on the next read.
    """

    def __init__(self, store: LedgerStore):
        self.store = store

    def execute(self, days: int = 1) -> Result[ClockDTO]:
        try:
            today = self.store.clock.advance(days)
        except ValueError as e:
            return Return.err(
                Error(
                    code="VALIDATION_FAILED",
                    message="Days to advance must be a positive integer",
                    reason=str(e),
                )
            )

        logger.info(f"Ledger date advanced by {days} day(s) to {today.isoformat()}")
        return Return.ok(ClockDTO(today=today))
