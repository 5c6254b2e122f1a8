"""Date helpers and providers of the current date."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Protocol

from dateutil.relativedelta import relativedelta


class Clock(Protocol):
    """Anything that can tell today's date."""

    def today(self) -> date: ...


class SystemClock:
    """Reads the date from the system calendar."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """A clock that stays on a given date until moved."""

    def __init__(self, current: date):
        self._current = current

    def today(self) -> date:
        return self._current

    def advance(self, days: int = 0, months: int = 0) -> date:
        """Moves the clock forward and returns the new date."""
        self._current += relativedelta(days=days, months=months)
        return self._current


def one_month_before(day: date) -> date:
    """Returns the same day of the previous month, clamped to its last day."""
    return day - relativedelta(months=1)


def due_date_for(issued_on: date, due_days: int) -> date:
    return issued_on + timedelta(days=due_days)


def days_past_due(due_date: date, today: date) -> int:
    """Days elapsed since ``due_date``; 0 while the bill is not yet overdue."""
    return max((today - due_date).days, 0)
