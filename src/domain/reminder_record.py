"""Reminder Record Domain Entity

Per-customer reminder bookkeeping. Informational only: overdue computation
never reads it.
"""

from datetime import date
from enum import Enum
from typing import Optional
from pydantic import Field
from src.domain.base import BaseModel


class ReminderStatus(str, Enum):
    """Reminder lifecycle states"""
    QUEUED = "Queued"
    SENT = "Sent"
    PLANNED = "Planned"


class ReminderRecord(BaseModel):
    """
    Reminder Record - Reminder history for one customer

    Domain Rules:
    - At most one record per customer
    - count only grows
    """

    customer_id: int = Field(
        ...,
        description="Referenced customer id"
    )

    last_sent: Optional[date] = Field(
        default=None,
        description="Date the last reminder went out"
    )

    count: int = Field(
        default=0,
        ge=0,
        description="Cumulative number of reminders sent"
    )

    next_scheduled: Optional[date] = Field(
        default=None,
        description="Date of the next planned reminder"
    )

    status: ReminderStatus = Field(
        default=ReminderStatus.QUEUED,
        description="Reminder status (Queued, Sent, Planned)"
    )
