"""Transaction API Routes

FastAPI routes for recording credit and payment entries.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import ClientError
from src.api.schemas.ledger_request import CreditRequestSchema, PaymentRequestSchema
from src.app.repositories.ledger_store import LedgerStore
from src.app.use_cases.ledger import (
    SaveCredit,
    SavePayment,
    ToggleReminder,
    SaveCreditCommandDTO,
    SavePaymentCommandDTO,
    SaveCreditResponseDTO,
    SavePaymentResponseDTO,
    ToggleReminderResponseDTO,
)
from src.depends import get_store
from src.domain.credit_entry import CreditEntry
from src.domain.payment_entry import PaymentEntry
from src.libs.result import Error

router = APIRouter(tags=["Transactions"])

NOT_FOUND_CODES = {"CUSTOMER_NOT_FOUND", "CREDIT_NOT_FOUND"}


def _raise_for(error: Error):
    if error.code in NOT_FOUND_CODES:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ClientError(error)


def _save_credit(store: LedgerStore, request: CreditRequestSchema, credit_id: Optional[int] = None):
    command = SaveCreditCommandDTO(
        id=credit_id,
        customer_id=request.customer_id,
        amount=request.amount,
        issue_date=request.issue_date,
        due_date=request.due_date,
        remarks=request.remarks,
    )
    use_case = SaveCredit(store, enforce_customer_reference=ApplicationConfig.ENFORCE_CUSTOMER_REFERENCE)
    result = use_case.execute(command)
    if result.is_err():
        _raise_for(result.error)
    return result.value


def _save_payment(store: LedgerStore, request: PaymentRequestSchema, payment_id: Optional[int] = None):
    command = SavePaymentCommandDTO(
        id=payment_id,
        customer_id=request.customer_id,
        amount=request.amount,
        payment_date=request.payment_date,
        payment_type=request.payment_type,
        method=request.method,
        note=request.note,
    )
    use_case = SavePayment(store, enforce_customer_reference=ApplicationConfig.ENFORCE_CUSTOMER_REFERENCE)
    result = use_case.execute(command)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get("/credits", response_model=List[CreditEntry])
async def list_credits(store: LedgerStore = Depends(get_store)):
    return store.credits()


@router.post("/credits", response_model=SaveCreditResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_credit(request: CreditRequestSchema, store: LedgerStore = Depends(get_store)):
    """
    Record credit extended to a customer.

    Going over the customer's credit limit does not block the entry;
    `limit_exceeded` in the response tells the UI to show a warning.

    **Returns:**
    - 201: Credit recorded
    - 400: Invalid request parameters
    - 404: Customer not found
    """
    return _save_credit(store, request)


@router.put("/credits/{credit_id}", response_model=SaveCreditResponseDTO)
async def update_credit(
    credit_id: int,
    request: CreditRequestSchema,
    store: LedgerStore = Depends(get_store),
):
    if store.get_credit(credit_id) is None:
        raise ClientError(
            Error(code="CREDIT_NOT_FOUND", message=f"Credit entry {credit_id} not found"),
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return _save_credit(store, request, credit_id)


@router.post("/credits/{credit_id}/reminder", response_model=ToggleReminderResponseDTO)
async def toggle_reminder(credit_id: int, store: LedgerStore = Depends(get_store)):
    """Flip the reminder-sent flag of a credit entry."""
    use_case = ToggleReminder(store, reminder_interval_days=ApplicationConfig.REMINDER_INTERVAL_DAYS)
    result = use_case.execute(credit_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get("/payments", response_model=List[PaymentEntry])
async def list_payments(store: LedgerStore = Depends(get_store)):
    return store.payments()


@router.post("/payments", response_model=SavePaymentResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_payment(request: PaymentRequestSchema, store: LedgerStore = Depends(get_store)):
    """
    Record a payment from a customer.

    Payments reduce the customer's overall balance and are not matched to
    a credit entry. Overpayment is accepted.

    **Returns:**
    - 201: Payment recorded
    - 400: Invalid request parameters
    - 404: Customer not found
    """
    return _save_payment(store, request)


@router.put("/payments/{payment_id}", response_model=SavePaymentResponseDTO)
async def update_payment(
    payment_id: int,
    request: PaymentRequestSchema,
    store: LedgerStore = Depends(get_store),
):
    if store.get_payment(payment_id) is None:
        raise ClientError(
            Error(code="PAYMENT_NOT_FOUND", message=f"Payment entry {payment_id} not found"),
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return _save_payment(store, request, payment_id)
