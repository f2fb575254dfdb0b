import pytest
import pytest_asyncio
from datetime import date, datetime
from httpx import ASGITransport, AsyncClient

from src.adapter.repositories.in_memory_ledger_store import InMemoryLedgerStore
from src.adapter.sample_data import load_sample_ledger
from src.depends import get_store
from src.domain.clock import Clock


@pytest.fixture
def ledger_store():
    """Sample ledger with the clock at 2026-01-19"""
    store = InMemoryLedgerStore(
        Clock(date(2026, 1, 19), time_source=lambda: datetime(2026, 1, 19, 10, 30))
    )
    load_sample_ledger(store)
    return store


@pytest_asyncio.fixture
async def client(ledger_store):
    """Create test client with the store dependency overridden"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)
    app.dependency_overrides[get_store] = lambda: ledger_store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
