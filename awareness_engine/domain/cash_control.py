"""Cash control - month-over-month expense and balance movement"""

from datetime import date
from typing import List, Optional

from awareness_engine.domain.models import Account, CashControlData, Transaction
from awareness_engine.domain.periods import expense_total, last_month_expenses, this_month_expenses
from awareness_engine.domain.rules import THRESHOLDS
from awareness_engine.utils.number_utils import clamp, round_half_up

CASH_ACCOUNT_TYPES = ("checking", "savings")


def current_balance(accounts: List[Account]) -> float:
    """Available cash: checking plus savings (credit and CDs excluded)"""
    return sum(a.balance for a in accounts if a.type in CASH_ACCOUNT_TYPES)


def estimate_last_month_balance(balance: float) -> float:
    """
    Estimate last month's balance as a fixed haircut of the current one.

    Known approximation: there is no balance history yet. Replace with the
    real figure once one is available.
    """
    if balance == 0:
        return 0.0
    return balance * THRESHOLDS.balance_estimate_factor


def month_over_month_percent(current: float, previous: float) -> Optional[float]:
    """Percent change; None when previous is 0 (no signal, not zero change)"""
    if previous == 0:
        return None
    return (current - previous) / previous * 100


def cash_control_status(expenses_change_pct: Optional[float], balance_change_pct: Optional[float]) -> str:
    """
    Status rules:
    - high: expenses up more than 10% MoM and balance down
    - moderate: exactly one of the two
    - good: neither, including missing signals
    """
    expenses_up = expenses_change_pct is not None and expenses_change_pct > THRESHOLDS.expense_rise_pct
    balance_down = balance_change_pct is not None and balance_change_pct < 0

    if expenses_up and balance_down:
        return "high"
    elif expenses_up or balance_down:
        return "moderate"
    else:
        return "good"


def cash_control_combined_score(expenses_change_pct: Optional[float], balance_change_pct: Optional[float]) -> int:
    """
    Single 0-100 score: 50 + balance change * 0.8 - expense change * 0.8.

    Missing deltas count as 0.
    """
    expenses = expenses_change_pct or 0.0
    balance = balance_change_pct or 0.0
    weight = THRESHOLDS.combined_score_weight
    raw = THRESHOLDS.combined_score_baseline + balance * weight - expenses * weight
    return int(clamp(round_half_up(raw), 0, 100))


def score_to_filled_segments(score: float) -> int:
    """Map a 0-100 score onto 1-5 progress segments"""
    for segment, upper_bound in enumerate(THRESHOLDS.segment_upper_bounds, start=1):
        if score <= upper_bound:
            return segment
    return len(THRESHOLDS.segment_upper_bounds) + 1


def cash_control_data(
    transactions: List[Transaction],
    accounts: List[Account],
    today: date | None = None,
) -> CashControlData:
    """Main entry point: expenses and balance deltas with status and score"""
    expenses_this_month = expense_total(this_month_expenses(transactions, today))
    expenses_last_month = expense_total(last_month_expenses(transactions, today))
    expenses_change_pct = month_over_month_percent(expenses_this_month, expenses_last_month)

    balance_now = current_balance(accounts)
    balance_last_month = estimate_last_month_balance(balance_now)
    balance_change_pct = month_over_month_percent(balance_now, balance_last_month)

    combined_score = cash_control_combined_score(expenses_change_pct, balance_change_pct)

    return CashControlData(
        expenses_this_month=expenses_this_month,
        expenses_last_month=expenses_last_month,
        expenses_change_pct=expenses_change_pct,
        balance_current=balance_now,
        balance_last_month=balance_last_month,
        balance_change_pct=balance_change_pct,
        status=cash_control_status(expenses_change_pct, balance_change_pct),
        combined_score=combined_score,
        filled_segments=score_to_filled_segments(combined_score),
    )
