"""Ledger API Routes

FastAPI routes for the dashboard, overdue tracking and the ledger clock.
"""

from typing import List
from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import ClientError
from src.api.schemas.ledger_request import AdvanceClockRequestSchema
from src.app.repositories.ledger_store import LedgerStore
from src.app.use_cases.ledger import (
    AdvanceDate,
    GetDashboard,
    ResetLedger,
    ClockDTO,
    DashboardDTO,
    LedgerRowDTO,
    OverdueCreditDTO,
)
from src.app.use_cases.ledger.aggregation import overdue_credit_lines, running_ledger
from src.depends import get_store
from src.domain.reminder_record import ReminderRecord

router = APIRouter(tags=["Ledger"])


@router.get("/dashboard", response_model=DashboardDTO)
async def get_dashboard(store: LedgerStore = Depends(get_store)):
    """
    Dashboard overview.

    Global totals, upcoming-due and past-due aging buckets, and one summary
    row per customer with its risk score.
    """
    use_case = GetDashboard(store, new_customer_window_days=ApplicationConfig.NEW_CUSTOMER_WINDOW_DAYS)
    return use_case.execute().value


@router.get("/overdue", response_model=List[OverdueCreditDTO])
async def list_overdue(store: LedgerStore = Depends(get_store)):
    """Past-due credit entries for customers that still owe money."""
    return overdue_credit_lines(store)


@router.get("/reminders", response_model=List[ReminderRecord])
async def list_reminders(store: LedgerStore = Depends(get_store)):
    return store.reminders()


@router.get("/history", response_model=List[LedgerRowDTO])
async def get_history(store: LedgerStore = Depends(get_store)):
    """Full ledger history with a running balance across all customers."""
    return running_ledger(store)


@router.get("/clock", response_model=ClockDTO)
async def get_clock(store: LedgerStore = Depends(get_store)):
    return ClockDTO(today=store.clock.today)


@router.post("/clock/advance", response_model=ClockDTO)
async def advance_clock(request: AdvanceClockRequestSchema, store: LedgerStore = Depends(get_store)):
    """Move the ledger date forward (one day by default)."""
    result = AdvanceDate(store).execute(request.days)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post("/ledger/reset", response_model=ClockDTO, status_code=status.HTTP_200_OK)
async def reset_ledger(store: LedgerStore = Depends(get_store)):
    """Clear all customers, entries, reminders and history. The date is kept."""
    return ResetLedger(store).execute().value
