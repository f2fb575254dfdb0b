"""Data Transfer Objects for Ledger Use Cases

Pydantic models for command inputs and derived read models.

Command DTOs accept raw form values (strings, numbers, None) without
validating them: validation happens when the use case builds the domain
entity, so a bad form yields a VALIDATION_FAILED result instead of an
exception at the call site.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, Field

from src.domain.customer import Customer
from src.domain.credit_entry import CreditEntry
from src.domain.payment_entry import PaymentEntry
from src.domain.reminder_record import ReminderRecord
from src.domain.history_entry import HistoryType


class RiskTier(str, Enum):
    """Display tiers for the risk score"""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# --- Commands -----------------------------------------------------------------


class SaveCustomerCommandDTO(BaseModel):
    """
    Command DTO for adding or updating a customer

    Used as input to SaveCustomer. An id matching an existing customer
    updates it; anything else inserts.
    """

    id: Optional[int] = Field(
        default=None,
        description="Existing customer id to update (omit to insert)"
    )

    name: Any = Field(
        default=None,
        description="Customer name (required, non-empty)"
    )

    contact: Any = Field(
        default=None,
        description="Phone or contact (required, non-empty)"
    )

    address: Any = Field(
        default="",
        description="Postal address"
    )

    credit_limit: Any = Field(
        default=None,
        description="Credit limit (finite, >= 0)"
    )

    notes: Any = Field(
        default="",
        description="Free-text notes"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Alice Traders",
                "contact": "555-1010",
                "address": "12 Market Road",
                "credit_limit": "2000",
                "notes": "Frequent buyer"
            }
        }


class SaveCreditCommandDTO(BaseModel):
    """
    Command DTO for adding or updating a credit entry

    Used as input to SaveCredit.
    """

    id: Optional[int] = Field(
        default=None,
        description="Existing credit id to update (omit to insert)"
    )

    customer_id: Any = Field(
        default=None,
        description="Customer the credit is extended to"
    )

    amount: Any = Field(
        default=None,
        description="Amount owed (finite, > 0)"
    )

    issue_date: Any = Field(
        default=None,
        description="Issue date (YYYY-MM-DD)"
    )

    due_date: Any = Field(
        default=None,
        description="Due date (YYYY-MM-DD)"
    )

    remarks: Any = Field(
        default="",
        description="Free-text remarks"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "amount": "500",
                "issue_date": "2026-01-03",
                "due_date": "2026-01-10",
                "remarks": "Net 7"
            }
        }


class SavePaymentCommandDTO(BaseModel):
    """
    Command DTO for adding or updating a payment entry

    Used as input to SavePayment.
    """

    id: Optional[int] = Field(
        default=None,
        description="Existing payment id to update (omit to insert)"
    )

    customer_id: Any = Field(
        default=None,
        description="Customer making the payment"
    )

    amount: Any = Field(
        default=None,
        description="Amount repaid (finite, > 0)"
    )

    payment_date: Any = Field(
        default=None,
        description="Payment date (YYYY-MM-DD)"
    )

    payment_type: Any = Field(
        default="Partial",
        description="Payment category"
    )

    method: Any = Field(
        default="Cash",
        description="Payment method"
    )

    note: Any = Field(
        default="",
        description="Free-text note"
    )


# --- Responses ----------------------------------------------------------------


class SaveCustomerResponseDTO(BaseModel):
    customer: Customer
    created: bool = Field(..., description="True when a new customer was inserted")


class SaveCreditResponseDTO(BaseModel):
    """
    Response DTO for SaveCredit

    limit_exceeded is a non-blocking warning: the credit is stored anyway.
    """

    credit: CreditEntry
    created: bool = Field(..., description="True when a new entry was inserted")
    limit_exceeded: bool = Field(
        default=False,
        description="Projected balance is above the customer's credit limit"
    )


class SavePaymentResponseDTO(BaseModel):
    payment: PaymentEntry
    created: bool = Field(..., description="True when a new entry was inserted")


class ToggleReminderResponseDTO(BaseModel):
    credit: CreditEntry
    reminder: Optional[ReminderRecord] = Field(
        default=None,
        description="Customer reminder record after the toggle, if any"
    )


class ClockDTO(BaseModel):
    today: date = Field(..., description="Current simulated date")


class CustomerTotalsDTO(BaseModel):
    """
    Per-customer derived totals

    overdue_amount applies all payments against overdue credit in aggregate;
    payments are never matched to individual credit entries.
    """

    customer_id: int
    total_credit: Decimal = Field(..., description="Sum of credit amounts")
    total_payments: Decimal = Field(..., description="Sum of payment amounts")
    balance: Decimal = Field(..., description="total_credit - total_payments")
    overdue_amount: Decimal = Field(..., description="Past-due credit not covered by payments (>= 0)")
    max_overdue_days: int = Field(..., description="Days since the oldest missed due date")
    utilization: Decimal = Field(..., description="balance / total_credit, 0 without credit")

    @property
    def has_overdue(self) -> bool:
        return self.overdue_amount > 0


class GlobalTotalsDTO(BaseModel):
    customer_count: int
    total_credit: Decimal
    total_payments: Decimal
    outstanding: Decimal = Field(..., description="total_credit - total_payments")
    overdue_total: Decimal
    overdue_customer_count: int
    new_customers_this_week: int


class AgingBucketsDTO(BaseModel):
    """Amounts grouped by day distance: 1-7, 8-30 and more than 30 days"""

    within7: Decimal = Decimal("0")
    within30: Decimal = Decimal("0")
    over30: Decimal = Decimal("0")


class CustomerRiskDTO(BaseModel):
    customer_id: int
    score: int = Field(..., ge=15, le=95)
    tier: RiskTier
    color: str


class CustomerSummaryDTO(BaseModel):
    """Row of the customer overview table"""

    customer_id: int
    name: str
    contact: str
    credit_limit: Decimal
    totals: CustomerTotalsDTO
    risk: CustomerRiskDTO
    status: str = Field(..., description="'Overdue' or 'OK'")


class OverdueCreditDTO(BaseModel):
    """
    Row of the overdue table

    outstanding is min(credit amount, customer balance), an estimate since
    payments are not matched to credits.
    """

    credit_id: int
    customer_id: int
    customer_label: str = Field(..., description="Customer name, or the raw id if unknown")
    due_date: date
    days_overdue: int
    outstanding: Decimal
    reminder_sent: bool


class LedgerRowDTO(BaseModel):
    timestamp: str
    customer_id: int
    customer_label: str
    type: HistoryType
    amount: Decimal
    marker: str
    running_balance: Decimal


class DashboardDTO(BaseModel):
    """Everything the dashboard screen renders in one payload"""

    today: date
    totals: GlobalTotalsDTO
    upcoming_due: AgingBucketsDTO
    past_due: AgingBucketsDTO
    customers: List[CustomerSummaryDTO]


class LimitCheckDTO(BaseModel):
    customer_id: int
    candidate_amount: Decimal
    limit_exceeded: bool
