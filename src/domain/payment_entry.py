"""Payment Entry Domain Entity

An amount repaid by a customer. Payments reduce the customer's aggregate
balance and are never matched to a specific credit entry.
"""

from datetime import date
from decimal import Decimal
from pydantic import Field
from src.domain.base import BaseModel


class PaymentEntry(BaseModel):
    """
    Payment Entry - Amount repaid by a customer

    Domain Rules:
    - amount is finite and strictly positive
    - overpayment is allowed (balance may go negative)
    """

    id: int = Field(
        ...,
        ge=1,
        description="Unique payment entry identifier"
    )

    customer_id: int = Field(
        ...,
        description="Referenced customer id"
    )

    amount: Decimal = Field(
        ...,
        gt=0,
        description="Amount repaid"
    )

    payment_date: date = Field(
        ...,
        description="Date the payment was received"
    )

    payment_type: str = Field(
        default="Partial",
        description="Payment category (e.g. 'Partial', 'Full', 'Advance')"
    )

    method: str = Field(
        default="Cash",
        description="Payment method (e.g. 'Cash', 'Bank transfer')"
    )

    note: str = Field(
        default="",
        description="Free-text note"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "customer_id": 1,
                "amount": "200.00",
                "payment_date": "2026-01-05",
                "payment_type": "Partial",
                "method": "Cash",
                "note": ""
            }
        }
