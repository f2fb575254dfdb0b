from .in_memory_ledger_store import InMemoryLedgerStore

__all__ = [
    "InMemoryLedgerStore",
]
