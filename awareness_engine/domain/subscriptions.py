"""Subscription load - what recurring charges cost relative to income"""

from typing import Iterable, List, Optional

from awareness_engine.domain.models import Subscription

BILLABLE_STATUSES = ("active", "trial")


def active_subscriptions(subscriptions: Iterable[Subscription]) -> List[Subscription]:
    """Active and trial subscriptions; cancelled ones no longer bill"""
    return [s for s in subscriptions if s.status in BILLABLE_STATUSES]


def monthly_subscription_total(subscriptions: Iterable[Subscription]) -> float:
    return sum(s.monthly_cost for s in active_subscriptions(subscriptions))


def annual_subscription_cost(subscriptions: Iterable[Subscription]) -> float:
    return monthly_subscription_total(subscriptions) * 12


def subscription_load_percent(monthly_total: float, monthly_income: float) -> Optional[float]:
    """Monthly subscriptions as a percent of income; None when income is not positive"""
    if monthly_income <= 0:
        return None
    return monthly_total / monthly_income * 100
