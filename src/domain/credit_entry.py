"""Credit Entry Domain Entity

An amount owed by a customer, issued on one date and due on another.
"""

from datetime import date
from decimal import Decimal
from pydantic import Field
from src.domain.base import BaseModel


class CreditEntry(BaseModel):
    """
    Credit Entry - Amount owed by a customer

    Domain Rules:
    - amount is finite and strictly positive
    - due_date is a calendar date; issue_date <= due_date is expected
      but not enforced
    - customer_id is a plain reference, resolved by lookup
    - reminder_sent is toggled from the overdue view
    """

    id: int = Field(
        ...,
        ge=1,
        description="Unique credit entry identifier"
    )

    customer_id: int = Field(
        ...,
        description="Referenced customer id"
    )

    amount: Decimal = Field(
        ...,
        gt=0,
        description="Amount owed"
    )

    issue_date: date = Field(
        ...,
        description="Date the credit was extended"
    )

    due_date: date = Field(
        ...,
        description="Date repayment is due"
    )

    remarks: str = Field(
        default="",
        description="Free-text remarks"
    )

    reminder_sent: bool = Field(
        default=False,
        description="Whether a payment reminder has been sent"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "customer_id": 1,
                "amount": "500.00",
                "issue_date": "2026-01-03",
                "due_date": "2026-01-10",
                "remarks": "Net 7",
                "reminder_sent": False
            }
        }
