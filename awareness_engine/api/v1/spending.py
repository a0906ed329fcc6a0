"""POST /v1/spending/breakdown - category breakdown for the spending chart"""

from fastapi import APIRouter

from awareness_engine.api.v1.schemas import BreakdownRequest, CategoryBreakdownResponse, CategorySegmentSchema
from awareness_engine.config import settings
from awareness_engine.domain.periods import expenses_for_period
from awareness_engine.domain.spending import category_breakdown

router = APIRouter()


@router.post("/spending/breakdown", response_model=CategoryBreakdownResponse)
def create_spending_breakdown(request_body: BreakdownRequest):
    """
    Rank expense categories for a chart period.

    Returns:
        Top categories plus an "Other" tail; segment amounts sum to total
    """
    expenses = expenses_for_period(
        [t.to_domain() for t in request_body.transactions],
        request_body.period,
        today=request_body.as_of,
    )
    top_n = settings.default_top_n if request_body.top_n is None else request_body.top_n
    breakdown = category_breakdown(expenses, top_n)

    return CategoryBreakdownResponse(
        total=breakdown.total,
        segments=[
            CategorySegmentSchema(name=s.name, amount=s.amount, color=s.color)
            for s in breakdown.segments
        ],
    )
