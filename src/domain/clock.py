"""Ledger Clock

Holds the simulated current date read by every date-dependent derivation.
"""

from datetime import date, datetime, timedelta
from typing import Callable


class Clock:
    """
    Simulated calendar date

    The date only moves forward, through advance(). Time of day is taken
    from time_source when a timestamp is needed.
    """

    def __init__(self, today: date, time_source: Callable[[], datetime] = datetime.now):
        self._today = today
        self._time_source = time_source

    @property
    def today(self) -> date:
        return self._today

    def advance(self, days: int = 1) -> date:
        """
        Move the date forward

        Args:
            days: Positive number of calendar days

        Raises:
            ValueError: days is not a positive integer
        """
        if isinstance(days, bool) or not isinstance(days, int) or days < 1:
            raise ValueError(f"days must be a positive integer, got {days!r}")
        self._today = self._today + timedelta(days=days)
        return self._today

    def days_since(self, other: date) -> int:
        """Whole days from other to today (negative when other is in the future)"""
        return (self._today - other).days

    def timestamp(self) -> str:
        """Current simulated date with wall-clock time, as YYYY-MM-DD HH:MM"""
        now = self._time_source()
        return f"{self._today.isoformat()} {now:%H:%M}"
