"""Spending breakdown - expenses bucketed by category label for the donut chart"""

from typing import Dict, List

from awareness_engine.domain.models import CategoryBreakdown, CategorySegment, Transaction
from awareness_engine.domain.rules import THRESHOLDS

PALETTE = (
    "#475569",  # slate-600
    "#64748b",  # slate-500
    "#94a3b8",  # slate-400
    "#64748b",
    "#475569",
    "#94a3b8",  # Other
)
OTHER_COLOR_INDEX = 5
OTHER_LABEL = "Other"


def category_breakdown(expenses: List[Transaction], top_n: int = THRESHOLDS.default_top_n) -> CategoryBreakdown:
    """
    Rank categories by total spend and collapse the tail into "Other".

    - Category labels are grouped case-sensitively, amounts taken as absolute
    - Equal totals keep first-encountered order (stable sort)
    - "Other" is appended last and omitted when its total is zero
    """
    by_category: Dict[str, float] = {}
    for txn in expenses:
        by_category[txn.category] = by_category.get(txn.category, 0.0) + abs(txn.amount)

    ranked = sorted(by_category.items(), key=lambda item: item[1], reverse=True)
    top_n = max(top_n, 0)
    top, rest = ranked[:top_n], ranked[top_n:]

    segments = [
        CategorySegment(name=name, amount=amount, color=PALETTE[rank % len(PALETTE)])
        for rank, (name, amount) in enumerate(top)
    ]

    rest_amount = sum(amount for _, amount in rest)
    if rest_amount > 0:
        segments.append(
            CategorySegment(name=OTHER_LABEL, amount=rest_amount, color=PALETTE[OTHER_COLOR_INDEX])
        )

    total = sum(abs(txn.amount) for txn in expenses)
    return CategoryBreakdown(total=total, segments=segments)
