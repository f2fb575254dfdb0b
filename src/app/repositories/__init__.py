from .ledger_store import LedgerStore

__all__ = [
    "LedgerStore",
]
