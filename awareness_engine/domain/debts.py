"""Debt summary for the coaching cards"""

from datetime import date
from typing import List, Optional

from awareness_engine.domain.models import Debt, NextPayment

# Due-day distance wraps on a nominal 30-day month
DAYS_IN_PAYMENT_CYCLE = 30


def total_debt(debts: List[Debt]) -> float:
    """Outstanding balance across debts that are not paid off"""
    return sum(d.balance for d in debts if d.status != "paid_off")


def _days_until_due(due_day: int, today_day: int) -> int:
    if due_day >= today_day:
        return due_day - today_day
    return DAYS_IN_PAYMENT_CYCLE - today_day + due_day


def next_payment(debts: List[Debt], today: date | None = None) -> Optional[NextPayment]:
    """
    Nearest upcoming minimum payment.

    Only active debts with a due day and a positive minimum payment count.
    Equal distances keep input order.
    """
    today = today or date.today()

    candidates = [
        NextPayment(name=d.name, amount=d.minimum_payment, due_day=d.due_day)
        for d in debts
        if d.status == "active" and d.due_day is not None and (d.minimum_payment or 0) > 0
    ]
    if not candidates:
        return None

    return min(candidates, key=lambda p: _days_until_due(p.due_day, today.day))
