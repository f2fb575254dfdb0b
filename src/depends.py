from datetime import date
from config import ApplicationConfig
from src.adapter.repositories.in_memory_ledger_store import InMemoryLedgerStore
from src.adapter.sample_data import load_sample_ledger
from src.app.repositories.ledger_store import LedgerStore
from src.domain.clock import Clock


def build_store(config=ApplicationConfig) -> InMemoryLedgerStore:
    start = config.LEDGER_START_DATE or date.today()
    if isinstance(start, str):
        start = date.fromisoformat(start)
    store = InMemoryLedgerStore(Clock(start))
    if config.SEED_SAMPLE_DATA:
        load_sample_ledger(store)
    return store


ledger_store = build_store()


def get_store() -> LedgerStore:
    return ledger_store
