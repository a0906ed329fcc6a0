"""Financial clarity score - visibility, behavior and stability combined into 0-100"""

from datetime import date
from typing import Optional

from awareness_engine.domain.categories import CategoryBucket, bucket_total
from awareness_engine.domain.models import ClarityBreakdown, ClarityScope, FinancialClarityResult
from awareness_engine.domain.periods import expense_total, income_in_month, this_month_expenses
from awareness_engine.domain.rules import THRESHOLDS
from awareness_engine.domain.scope import scope_subscriptions, visible_accounts
from awareness_engine.domain.subscriptions import active_subscriptions
from awareness_engine.utils.number_utils import clamp


def _visibility_score(scope: ClarityScope) -> int:
    """+20 for accounts at two or more institutions, +20 for a tracked subscription"""
    score = 0

    accounts = visible_accounts(scope.accounts, scope.visible_account_ids)
    institution_ids = {a.institution_id for a in accounts}
    if len(institution_ids) >= THRESHOLDS.min_institutions_for_visibility:
        score += THRESHOLDS.gate_points

    subscriptions = scope_subscriptions(scope.subscriptions, scope.visible_account_ids)
    if active_subscriptions(subscriptions):
        score += THRESHOLDS.gate_points

    return min(score, THRESHOLDS.max_visibility)


def _behavior_score(scope: ClarityScope) -> int:
    """+20 when transfers to savings exceed 10% of income"""
    if scope.monthly_income <= 0:
        return 0

    transfers = bucket_total(scope.visible_transactions, CategoryBucket.TRANSFER)
    savings_rate = transfers / scope.monthly_income * 100
    if savings_rate > THRESHOLDS.clarity_savings_rate_pct:
        return min(THRESHOLDS.gate_points, THRESHOLDS.max_behavior)
    return 0


def _stability_score(scope: ClarityScope, today: date) -> int:
    """+20 for fees under 2% of this month's spend, +20 for non-negative cash flow"""
    score = 0

    expenses = this_month_expenses(scope.visible_transactions, today)
    spent = expense_total(expenses)
    fees = bucket_total(expenses, CategoryBucket.FEE)
    # no spend means no fees: vacuously stable
    fee_percent = fees / spent * 100 if spent > 0 else 0.0
    if fee_percent < THRESHOLDS.fee_ratio_pct:
        score += THRESHOLDS.gate_points

    earned = income_in_month(scope.visible_transactions, today.year, today.month)
    if earned >= spent:
        score += THRESHOLDS.gate_points

    return min(score, THRESHOLDS.max_stability)


def calculate_financial_clarity(scope: ClarityScope, today: date | None = None) -> FinancialClarityResult:
    """
    Calculate the clarity score from 0 (opaque) to 100 (fully clear).

    Sub-scores:
    - visibility (max 40): breadth of linked institutions and subscriptions
    - behavior (max 20): savings rate over 10% of income
    - stability (max 40): low fees and income covering spend this month
    """
    today = today or date.today()

    breakdown = ClarityBreakdown(
        visibility=_visibility_score(scope),
        behavior=_behavior_score(scope),
        stability=_stability_score(scope, today),
    )
    total = breakdown.visibility + breakdown.behavior + breakdown.stability

    return FinancialClarityResult(score=int(clamp(total, 0, 100)), breakdown=breakdown)


def clarity_label(score: float) -> str:
    if score >= THRESHOLDS.strong_label_min:
        return "Strong"
    elif score >= THRESHOLDS.moderate_label_min:
        return "Moderate"
    else:
        return "Needs attention"


def clarity_subtext(result: FinancialClarityResult, subscription_load_percent: Optional[float]) -> str:
    """One-line explanation for the clarity card, highest-priority reason first"""
    if result.score >= THRESHOLDS.strong_label_min:
        return "Strong visibility and stability."
    if subscription_load_percent is not None and subscription_load_percent > THRESHOLDS.subscription_load_pct:
        return "Reduce subscription load to improve."
    if result.breakdown.visibility < THRESHOLDS.max_visibility:
        return "Connect more accounts for better visibility."
    if result.breakdown.stability < THRESHOLDS.max_stability:
        return "Improve cash flow or reduce fees to improve."
    return "Good visibility. Review spending to improve."
