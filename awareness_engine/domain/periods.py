"""Period filtering - calendar-month and rolling-window views over transactions"""

from datetime import date
from enum import Enum
from typing import Iterable, List, Union

from awareness_engine.domain.exceptions import InvalidPeriodError
from awareness_engine.domain.models import Transaction
from awareness_engine.domain.rules import THRESHOLDS
from awareness_engine.utils.date_utils import days_before, is_in_month, previous_month


class ChartPeriod(str, Enum):
    THIS_MONTH = "this_month"
    LAST_30_DAYS = "last_30_days"


def expense_total(transactions: Iterable[Transaction]) -> float:
    """Sum of absolute amounts of expense transactions"""
    return sum(abs(t.amount) for t in transactions if t.type == "expense")


def expenses_in_month(transactions: Iterable[Transaction], year: int, month: int) -> List[Transaction]:
    return [
        t for t in transactions
        if t.type == "expense" and is_in_month(t.date, year, month)
    ]


def income_in_month(transactions: Iterable[Transaction], year: int, month: int) -> float:
    return sum(
        t.amount for t in transactions
        if t.type == "income" and is_in_month(t.date, year, month)
    )


def this_month_expenses(transactions: Iterable[Transaction], today: date | None = None) -> List[Transaction]:
    today = today or date.today()
    return expenses_in_month(transactions, today.year, today.month)


def last_month_expenses(transactions: Iterable[Transaction], today: date | None = None) -> List[Transaction]:
    today = today or date.today()
    year, month = previous_month(today.year, today.month)
    return expenses_in_month(transactions, year, month)


def expenses_for_period(
    transactions: Iterable[Transaction],
    period: Union[ChartPeriod, str],
    today: date | None = None,
) -> List[Transaction]:
    """
    Expense transactions inside a chart period.

    - this_month: current calendar year and month
    - last_30_days: today - 30 days through today, both ends inclusive

    Raises:
        InvalidPeriodError: period is not a ChartPeriod value
    """
    try:
        period = ChartPeriod(period)
    except ValueError as e:
        raise InvalidPeriodError(f"Unsupported period: {period!r}") from e

    today = today or date.today()

    if period is ChartPeriod.THIS_MONTH:
        return this_month_expenses(transactions, today)

    cutoff = days_before(today, THRESHOLDS.rolling_window_days)
    return [
        t for t in transactions
        if t.type == "expense" and cutoff <= t.date <= today
    ]
