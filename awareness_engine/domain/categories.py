"""Category taxonomy - free-text category labels mapped onto a closed set of buckets"""

from enum import Enum
from typing import Dict, Iterable, Tuple

from awareness_engine.domain.models import Transaction


class CategoryBucket(str, Enum):
    """Buckets the scoring rules care about"""

    FEE = "fee"
    TRANSFER = "transfer"
    DINING = "dining"
    UTILITIES = "utilities"


class BudgetBucket(str, Enum):
    """50/30/20 budget buckets"""

    NEEDS = "needs"
    WANTS = "wants"
    SAVINGS = "savings"


CATEGORY_KEYWORDS: Dict[CategoryBucket, Tuple[str, ...]] = {
    CategoryBucket.FEE: ("fee",),
    CategoryBucket.TRANSFER: ("transfer",),
    CategoryBucket.DINING: ("dining",),
    CategoryBucket.UTILITIES: ("utilities",),
}

BUDGET_KEYWORDS: Dict[BudgetBucket, Tuple[str, ...]] = {
    BudgetBucket.NEEDS: ("rent", "utilities", "groceries", "transportation", "health", "fees"),
    BudgetBucket.WANTS: ("dining", "entertainment", "shopping"),
    BudgetBucket.SAVINGS: ("transfer",),
}


def _contains_any(category: str, keywords: Iterable[str]) -> bool:
    label = category.lower()
    return any(keyword in label for keyword in keywords)


def matches_bucket(category: str, bucket: CategoryBucket) -> bool:
    """Case-insensitive substring match, e.g. "Bank Fees" is a FEE category"""
    return _contains_any(category, CATEGORY_KEYWORDS[bucket])


def matches_budget_bucket(category: str, bucket: BudgetBucket) -> bool:
    return _contains_any(category, BUDGET_KEYWORDS[bucket])


def bucket_total(transactions: Iterable[Transaction], bucket: CategoryBucket) -> float:
    """Sum of absolute expense amounts whose category falls in the bucket"""
    return sum(
        abs(t.amount)
        for t in transactions
        if t.type == "expense" and matches_bucket(t.category, bucket)
    )
