"""Customer API Routes

FastAPI routes for customer maintenance and per-customer figures.
"""

from decimal import Decimal
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status

from src.api.error import ClientError
from src.api.schemas.ledger_request import CustomerRequestSchema
from src.app.repositories.ledger_store import LedgerStore
from src.app.use_cases.ledger import (
    GetCustomerOverview,
    SaveCustomer,
    SaveCustomerCommandDTO,
    SaveCustomerResponseDTO,
    CustomerSummaryDTO,
    CustomerTotalsDTO,
    CustomerRiskDTO,
    LedgerRowDTO,
    LimitCheckDTO,
)
from src.app.use_cases.ledger.aggregation import (
    customer_risk,
    customer_totals,
    limit_exceeded,
    running_ledger,
)
from src.depends import get_store
from src.domain.customer import Customer
from src.libs.result import Error

router = APIRouter(prefix="/customers", tags=["Customers"])


def _require_customer(store: LedgerStore, customer_id: int) -> Customer:
    customer = store.get_customer(customer_id)
    if customer is None:
        raise ClientError(
            Error(code="CUSTOMER_NOT_FOUND", message=f"Customer {customer_id} not found"),
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return customer


def _save(store: LedgerStore, request: CustomerRequestSchema, customer_id: Optional[int] = None):
    command = SaveCustomerCommandDTO(
        id=customer_id,
        name=request.name,
        contact=request.contact,
        address=request.address,
        credit_limit=request.credit_limit,
        notes=request.notes,
    )
    result = SaveCustomer(store).execute(command)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("", response_model=List[Customer])
async def list_customers(store: LedgerStore = Depends(get_store)):
    """List all customers in insertion order."""
    return store.customers()


@router.post("", response_model=SaveCustomerResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_customer(request: CustomerRequestSchema, store: LedgerStore = Depends(get_store)):
    """
    Add a customer.

    The id is assigned by the ledger (highest id + 1) and the creation date
    is the current ledger date.

    **Returns:**
    - 201: Customer created
    - 400: Invalid request parameters
    """
    return _save(store, request)


@router.put("/{customer_id}", response_model=SaveCustomerResponseDTO)
async def update_customer(
    customer_id: int,
    request: CustomerRequestSchema,
    store: LedgerStore = Depends(get_store),
):
    """
    Edit a customer's name, contact, address, credit limit and notes.

    **Returns:**
    - 200: Customer updated
    - 400: Invalid request parameters
    - 404: Customer not found
    """
    _require_customer(store, customer_id)
    return _save(store, request, customer_id)


@router.get("/{customer_id}", response_model=CustomerSummaryDTO)
async def get_customer_overview(customer_id: int, store: LedgerStore = Depends(get_store)):
    """Customer details with totals, risk score and overdue status."""
    result = GetCustomerOverview(store).execute(customer_id)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
    return result.value


@router.get("/{customer_id}/totals", response_model=CustomerTotalsDTO)
async def get_customer_totals(customer_id: int, store: LedgerStore = Depends(get_store)):
    _require_customer(store, customer_id)
    return customer_totals(store, customer_id)


@router.get("/{customer_id}/risk", response_model=CustomerRiskDTO)
async def get_customer_risk(customer_id: int, store: LedgerStore = Depends(get_store)):
    _require_customer(store, customer_id)
    return customer_risk(store, customer_id)


@router.get("/{customer_id}/ledger", response_model=List[LedgerRowDTO])
async def get_customer_ledger(customer_id: int, store: LedgerStore = Depends(get_store)):
    """Customer history with a running balance."""
    _require_customer(store, customer_id)
    return running_ledger(store, customer_id)


@router.get("/{customer_id}/limit-check", response_model=LimitCheckDTO)
async def check_credit_limit(
    customer_id: int,
    amount: Decimal = Query(..., description="Credit amount being entered"),
    excluding_credit_id: Optional[int] = Query(
        default=None, description="Credit entry being edited, left out of the projection"
    ),
    store: LedgerStore = Depends(get_store),
):
    """
    Would this credit take the customer over their limit?

    Drives the non-blocking warning on the credit form; nothing is stored.
    """
    _require_customer(store, customer_id)
    return LimitCheckDTO(
        customer_id=customer_id,
        candidate_amount=amount,
        limit_exceeded=limit_exceeded(store, customer_id, amount, excluding_credit_id),
    )
