"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import Tuple


def previous_month(year: int, month: int) -> Tuple[int, int]:
    """(year, month) of the calendar month before the given one; January wraps to December"""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def is_in_month(day: date, year: int, month: int) -> bool:
    return day.year == year and day.month == month


def days_before(from_date: date, days: int) -> date:
    """Calendar date `days` days before from_date"""
    return from_date - timedelta(days=days)
