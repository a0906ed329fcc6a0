"""50/30/20 budget targets and month usage"""

from typing import Iterable

from awareness_engine.domain.categories import BudgetBucket, matches_budget_bucket
from awareness_engine.domain.models import Budget, BudgetUsage, Transaction
from awareness_engine.domain.periods import expenses_in_month
from awareness_engine.domain.rules import THRESHOLDS


def compute_budget(monthly_income: float) -> Budget:
    return Budget(
        monthly_income=monthly_income,
        needs_target=monthly_income * THRESHOLDS.needs_share,
        wants_target=monthly_income * THRESHOLDS.wants_share,
        savings_target=monthly_income * THRESHOLDS.savings_share,
    )


def budget_usage(transactions: Iterable[Transaction], year: int, month: int) -> BudgetUsage:
    """
    Expense totals per bucket for one calendar month.

    A category counts toward the first bucket it matches (needs, wants,
    savings); categories matching none are left out.
    """
    totals = {bucket: 0.0 for bucket in BudgetBucket}

    for txn in expenses_in_month(transactions, year, month):
        for bucket in BudgetBucket:
            if matches_budget_bucket(txn.category, bucket):
                totals[bucket] += abs(txn.amount)
                break

    return BudgetUsage(
        needs=totals[BudgetBucket.NEEDS],
        wants=totals[BudgetBucket.WANTS],
        savings=totals[BudgetBucket.SAVINGS],
    )
