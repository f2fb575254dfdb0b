"""Request schemas for Ledger API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field


class CustomerRequestSchema(BaseModel):
    """
    Request schema for adding or editing a customer

    Used for POST /customers and PUT /customers/{customer_id}.
    """

    name: str = Field(
        ...,
        min_length=1,
        description="Customer name (required, non-empty)"
    )

    contact: str = Field(
        ...,
        min_length=1,
        description="Phone or contact (required, non-empty)"
    )

    address: str = Field(
        default="",
        description="Postal address"
    )

    credit_limit: Decimal = Field(
        ...,
        ge=0,
        description="Credit limit (must be >= 0)"
    )

    notes: str = Field(
        default="",
        description="Free-text notes"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Dune Hardware",
                "contact": "555-4040",
                "address": "7 Quarry Road",
                "credit_limit": "2500",
                "notes": "Net 30"
            }
        }


class CreditRequestSchema(BaseModel):
    """
    Request schema for recording credit

    Used for POST /credits and PUT /credits/{credit_id}.
    """

    customer_id: int = Field(
        ...,
        description="Customer the credit is extended to"
    )

    amount: Decimal = Field(
        ...,
        gt=0,
        description="Amount owed (must be > 0)"
    )

    issue_date: date = Field(
        ...,
        description="Issue date (YYYY-MM-DD)"
    )

    due_date: date = Field(
        ...,
        description="Due date (YYYY-MM-DD)"
    )

    remarks: str = Field(
        default="",
        description="Free-text remarks"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "amount": "450",
                "issue_date": "2026-01-19",
                "due_date": "2026-02-02",
                "remarks": "Net 14"
            }
        }


class PaymentRequestSchema(BaseModel):
    """
    Request schema for recording a payment

    Used for POST /payments and PUT /payments/{payment_id}.
    """

    customer_id: int = Field(
        ...,
        description="Customer making the payment"
    )

    amount: Decimal = Field(
        ...,
        gt=0,
        description="Amount repaid (must be > 0)"
    )

    payment_date: date = Field(
        ...,
        description="Payment date (YYYY-MM-DD)"
    )

    payment_type: str = Field(
        default="Partial",
        description="Payment category"
    )

    method: str = Field(
        default="Cash",
        description="Payment method"
    )

    note: str = Field(
        default="",
        description="Free-text note"
    )


class AdvanceClockRequestSchema(BaseModel):
    days: int = Field(
        default=1,
        ge=1,
        description="Number of days to move the ledger date forward"
    )
