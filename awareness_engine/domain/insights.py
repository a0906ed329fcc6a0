"""Behavioral insight engine - deterministic rules evaluated in fixed priority order"""

from datetime import date
from enum import Enum
from typing import Callable, List, Optional, Sequence

from awareness_engine.domain.categories import CategoryBucket, bucket_total, matches_bucket
from awareness_engine.domain.models import BehavioralInsight, InsightScope, Transaction
from awareness_engine.domain.periods import expense_total, last_month_expenses, this_month_expenses
from awareness_engine.domain.rules import THRESHOLDS
from awareness_engine.domain.subscriptions import monthly_subscription_total, subscription_load_percent
from awareness_engine.utils.number_utils import round_half_up


class InsightType(str, Enum):
    HIGH_SUBSCRIPTION_LOAD = "high_subscription_load"
    HIGH_DINING_RATIO = "high_dining_ratio"
    FEE_DETECTED = "fee_detected"
    RISING_UTILITIES = "rising_utilities"
    STRONG_SAVINGS_RATE = "strong_savings_rate"


class _RuleContext:
    """Per-call derived values shared by the rules"""

    def __init__(self, scope: InsightScope, today: date):
        self.scope = scope
        self.this_month: List[Transaction] = this_month_expenses(scope.visible_transactions, today)
        self.last_month: List[Transaction] = last_month_expenses(scope.visible_transactions, today)
        self.this_month_total = expense_total(self.this_month)


InsightRule = Callable[[_RuleContext], Optional[BehavioralInsight]]


def _high_subscription_load(ctx: _RuleContext) -> Optional[BehavioralInsight]:
    monthly_total = monthly_subscription_total(ctx.scope.visible_subscriptions)
    load = subscription_load_percent(monthly_total, ctx.scope.monthly_income)
    if load is None or load <= THRESHOLDS.subscription_load_pct:
        return None
    return BehavioralInsight(
        type=InsightType.HIGH_SUBSCRIPTION_LOAD.value,
        message=f"{round_half_up(load)}% of income on subscriptions.",
    )


def _high_dining_ratio(ctx: _RuleContext) -> Optional[BehavioralInsight]:
    if ctx.this_month_total <= 0:
        return None
    ratio = bucket_total(ctx.this_month, CategoryBucket.DINING) / ctx.this_month_total * 100
    if ratio <= THRESHOLDS.dining_ratio_pct:
        return None
    return BehavioralInsight(
        type=InsightType.HIGH_DINING_RATIO.value,
        message=f"Dining {round_half_up(ratio)}% of spending.",
    )


def _fee_detected(ctx: _RuleContext) -> Optional[BehavioralInsight]:
    if not any(matches_bucket(t.category, CategoryBucket.FEE) for t in ctx.this_month):
        return None
    return BehavioralInsight(
        type=InsightType.FEE_DETECTED.value,
        message="Fees detected this month.",
    )


def _rising_utilities(ctx: _RuleContext) -> Optional[BehavioralInsight]:
    last = bucket_total(ctx.last_month, CategoryBucket.UTILITIES)
    if last <= 0:
        return None
    current = bucket_total(ctx.this_month, CategoryBucket.UTILITIES)
    if current <= last * THRESHOLDS.utilities_rise_factor:
        return None
    rise = (current - last) / last * 100
    return BehavioralInsight(
        type=InsightType.RISING_UTILITIES.value,
        message=f"Utilities up {round_half_up(rise)}% vs last month.",
    )


def _strong_savings_rate(ctx: _RuleContext) -> Optional[BehavioralInsight]:
    income = ctx.scope.monthly_income
    if income <= 0:
        return None
    rate = bucket_total(ctx.this_month, CategoryBucket.TRANSFER) / income * 100
    if rate <= THRESHOLDS.strong_savings_rate_pct:
        return None
    return BehavioralInsight(
        type=InsightType.STRONG_SAVINGS_RATE.value,
        message=f"{round_half_up(rate)}% of income to savings.",
    )


# Priority order; when more rules fire than there are slots, later ones are dropped
RULES: Sequence[InsightRule] = (
    _high_subscription_load,
    _high_dining_ratio,
    _fee_detected,
    _rising_utilities,
    _strong_savings_rate,
)


def generate_insights(scope: InsightScope, today: date | None = None) -> List[BehavioralInsight]:
    """
    Evaluate the insight rules over scoped data.

    Returns at most three insights, in rule order. Empty inputs simply
    produce no insights.
    """
    ctx = _RuleContext(scope, today or date.today())

    insights: List[BehavioralInsight] = []
    for rule in RULES:
        if len(insights) >= THRESHOLDS.max_insights:
            break
        insight = rule(ctx)
        if insight is not None:
            insights.append(insight)

    return insights
