"""Awareness report endpoints - score a supplied snapshot or one fetched from the data source"""

import time
import logging
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from awareness_engine.api.v1.schemas import (
    AwarenessRequest,
    AwarenessResponse,
    BudgetSchema,
    CashControlSchema,
    CategoryBreakdownResponse,
    ClarityBreakdownSchema,
    ClaritySchema,
    DebtSummarySchema,
    InsightSchema,
    NextPaymentSchema,
    SubscriptionSummarySchema,
)
from awareness_engine.api.dependencies import get_request_id, get_snapshot_client
from awareness_engine.config import settings
from awareness_engine.domain.awareness import build_awareness_report
from awareness_engine.domain.exceptions import SnapshotSourceError
from awareness_engine.domain.models import AwarenessReport, FinancialSnapshot
from awareness_engine.domain.periods import ChartPeriod
from awareness_engine.infrastructure.clients.snapshot import SnapshotClient
from awareness_engine.infrastructure.observability.logging import log_awareness_report
from awareness_engine.infrastructure.observability.metrics import record_report, snapshot_fetch_failures_counter

router = APIRouter()


def to_response(report: AwarenessReport) -> AwarenessResponse:
    """Flatten an AwarenessReport into the API response shape"""
    next_payment = report.next_payment

    return AwarenessResponse(
        visible_account_ids=sorted(report.visible_account_ids),
        spending=CategoryBreakdownResponse(
            total=report.spending.total,
            segments=[vars(segment) for segment in report.spending.segments],
        ),
        cash_control=CashControlSchema(**vars(report.cash_control)),
        clarity=ClaritySchema(
            score=report.clarity.score,
            label=report.clarity_label,
            subtext=report.clarity_subtext,
            breakdown=ClarityBreakdownSchema(**vars(report.clarity.breakdown)),
        ),
        subscriptions=SubscriptionSummarySchema(
            monthly_total=report.monthly_subscription_total,
            annual_cost=report.annual_subscription_cost,
            load_percent=report.subscription_load_percent,
        ),
        insights=[InsightSchema(type=i.type, message=i.message) for i in report.insights],
        debts=DebtSummarySchema(
            total=report.total_debt,
            next_payment=NextPaymentSchema(**vars(next_payment)) if next_payment else None,
        ),
        budget=BudgetSchema(
            monthly_income=report.budget.monthly_income,
            needs_target=report.budget.needs_target,
            wants_target=report.budget.wants_target,
            savings_target=report.budget.savings_target,
            needs_spent=report.budget_usage.needs,
            wants_spent=report.budget_usage.wants,
            savings_spent=report.budget_usage.savings,
        ),
    )


def _score_and_record(
    snapshot: FinancialSnapshot,
    request_id: str,
    user_id: str,
    selected_institution_id: Optional[str],
    period: ChartPeriod,
    top_n: Optional[int],
    as_of: Optional[date] = None,
) -> AwarenessResponse:
    start_time = time.perf_counter()

    report = build_awareness_report(
        snapshot,
        selected_institution_id=selected_institution_id,
        period=period,
        top_n=settings.default_top_n if top_n is None else top_n,
        today=as_of,
    )

    insight_types = [i.type for i in report.insights]
    duration_ms = (time.perf_counter() - start_time) * 1000
    record_report(report.clarity_label, insight_types)
    log_awareness_report(request_id, user_id, report.clarity.score, report.clarity_label, insight_types, duration_ms)

    return to_response(report)


@router.post("/awareness", response_model=AwarenessResponse)
def create_awareness_report(request_body: AwarenessRequest, request: Request):
    """
    Score a snapshot supplied in the request body.

    The optional institution filter narrows every component to accounts held
    at that institution; an unknown id scores an empty scope.
    """
    return _score_and_record(
        request_body.to_domain(),
        request_id=get_request_id(request),
        user_id="anonymous",
        selected_institution_id=request_body.selected_institution_id,
        period=request_body.period,
        top_n=request_body.top_n,
        as_of=request_body.as_of,
    )


@router.get("/users/{user_id}/awareness", response_model=AwarenessResponse)
async def get_user_awareness(
    user_id: str,
    request: Request,
    institution_id: Optional[str] = Query(None, description="Institution filter; omit for all"),
    period: ChartPeriod = Query(ChartPeriod.THIS_MONTH),
    top_n: Optional[int] = Query(None, ge=0),
    as_of: Optional[date] = Query(None, description="Reference date; defaults to today"),
    snapshot_client: SnapshotClient = Depends(get_snapshot_client),
):
    """
    Fetch a user's snapshot from the data source and score it.

    Flow:
    1. Fetch snapshot (accounts, transactions, subscriptions, debts, income)
    2. Build the awareness report for the requested scope
    3. Record metrics and logs
    """
    request_id = get_request_id(request)

    try:
        snapshot = await snapshot_client.get_snapshot(user_id)
    except SnapshotSourceError as e:
        snapshot_fetch_failures_counter.inc()
        logging.error(f"Data source error: {e}", extra={"request_id": request_id, "user_id": user_id})
        raise HTTPException(status_code=503, detail="Data source unavailable")

    try:
        return _score_and_record(
            snapshot,
            request_id=request_id,
            user_id=user_id,
            selected_institution_id=institution_id,
            period=period,
            top_n=top_n,
            as_of=as_of,
        )
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id, "user_id": user_id})
        raise HTTPException(status_code=500, detail="Internal server error")
