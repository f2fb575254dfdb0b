"""History Entry Domain Entity

Append-only audit trail used to render a running-balance ledger.
"""

from decimal import Decimal
from enum import Enum
from pydantic import Field
from src.domain.base import BaseModel


class HistoryType(str, Enum):
    """Kinds of ledger events"""
    CREDIT = "Credit"
    PAYMENT = "Payment"
    CUSTOMER = "Customer"


class HistoryEntry(BaseModel):
    """
    History Entry - One event in the ledger audit trail

    Domain Rules:
    - Entries are appended on insert only, never edited
    - timestamp is formatted as YYYY-MM-DD HH:MM
    """

    timestamp: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$",
        description="Event time (YYYY-MM-DD HH:MM)"
    )

    customer_id: int = Field(
        ...,
        description="Referenced customer id"
    )

    type: HistoryType = Field(
        ...,
        description="Event type (Credit, Payment, Customer)"
    )

    amount: Decimal = Field(
        default=Decimal("0"),
        description="Event amount (0 for customer events)"
    )

    marker: str = Field(
        default="",
        description="Short label shown next to the event"
    )
