"""Customer Domain Entity

A customer that can be extended credit. The credit limit is a soft ceiling:
it is only used to flag projected breaches, never to reject a credit entry.
"""

from datetime import date
from decimal import Decimal
from pydantic import Field
from src.domain.base import BaseModel


class Customer(BaseModel):
    """
    Customer - Counterparty of credit and payment entries

    Domain Rules:
    - id is unique within the store and never changes once assigned
    - name and contact are required (non-empty)
    - credit_limit is a finite, non-negative amount
    - created_date is set from the ledger clock on insert
    """

    id: int = Field(
        ...,
        ge=1,
        description="Unique customer identifier"
    )

    name: str = Field(
        ...,
        min_length=1,
        description="Customer display name"
    )

    contact: str = Field(
        ...,
        min_length=1,
        description="Phone number or other contact"
    )

    address: str = Field(
        default="",
        description="Postal address"
    )

    credit_limit: Decimal = Field(
        ...,
        ge=0,
        description="Soft credit ceiling"
    )

    notes: str = Field(
        default="",
        description="Free-text notes"
    )

    created_date: date = Field(
        ...,
        description="Date the customer was added"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Alice Traders",
                "contact": "555-1010",
                "address": "12 Market Road",
                "credit_limit": "2000.00",
                "notes": "Frequent buyer",
                "created_date": "2026-01-02"
            }
        }
