"""Awareness report - runs every scoring component over one scope"""

from datetime import date
from typing import Optional, Union

from awareness_engine.domain.budget import budget_usage, compute_budget
from awareness_engine.domain.cash_control import cash_control_data
from awareness_engine.domain.clarity import calculate_financial_clarity, clarity_label, clarity_subtext
from awareness_engine.domain.debts import next_payment, total_debt
from awareness_engine.domain.insights import generate_insights
from awareness_engine.domain.models import AwarenessReport, ClarityScope, FinancialSnapshot, InsightScope
from awareness_engine.domain.periods import ChartPeriod, expenses_for_period
from awareness_engine.domain.rules import THRESHOLDS
from awareness_engine.domain.scope import (
    resolve_visible_account_ids,
    scope_subscriptions,
    scope_transactions,
    visible_accounts,
)
from awareness_engine.domain.spending import category_breakdown
from awareness_engine.domain.subscriptions import (
    annual_subscription_cost,
    monthly_subscription_total,
    subscription_load_percent,
)


def build_awareness_report(
    snapshot: FinancialSnapshot,
    selected_institution_id: Optional[str] = None,
    period: Union[ChartPeriod, str] = ChartPeriod.THIS_MONTH,
    top_n: int = THRESHOLDS.default_top_n,
    today: date | None = None,
) -> AwarenessReport:
    """
    Main entry point: score a snapshot for the selected institution scope.

    Flow:
    1. Resolve visible accounts and scope transactions/subscriptions to them
    2. Break down spending for the chart period
    3. Cash control, clarity score and subscription load
    4. Behavioral insights
    5. Debt and budget summaries

    Raises:
        InvalidPeriodError: period is not a supported chart period
    """
    today = today or date.today()

    visible_ids = resolve_visible_account_ids(
        snapshot.institutions, snapshot.accounts, selected_institution_id
    )
    transactions = scope_transactions(snapshot.transactions, visible_ids)
    subscriptions = scope_subscriptions(snapshot.subscriptions, visible_ids)
    accounts = visible_accounts(snapshot.accounts, visible_ids)

    spending = category_breakdown(expenses_for_period(transactions, period, today), top_n)
    cash_control = cash_control_data(transactions, accounts, today)

    monthly_subs = monthly_subscription_total(subscriptions)
    load_percent = subscription_load_percent(monthly_subs, snapshot.monthly_income)

    clarity = calculate_financial_clarity(
        ClarityScope(
            institutions=snapshot.institutions,
            accounts=snapshot.accounts,
            visible_account_ids=visible_ids,
            subscriptions=snapshot.subscriptions,
            visible_transactions=transactions,
            monthly_income=snapshot.monthly_income,
        ),
        today,
    )

    insights = generate_insights(
        InsightScope(
            visible_transactions=transactions,
            visible_subscriptions=subscriptions,
            monthly_income=snapshot.monthly_income,
        ),
        today,
    )

    return AwarenessReport(
        visible_account_ids=visible_ids,
        spending=spending,
        cash_control=cash_control,
        clarity=clarity,
        clarity_label=clarity_label(clarity.score),
        clarity_subtext=clarity_subtext(clarity, load_percent),
        monthly_subscription_total=monthly_subs,
        annual_subscription_cost=annual_subscription_cost(subscriptions),
        subscription_load_percent=load_percent,
        insights=insights,
        total_debt=total_debt(snapshot.debts),
        next_payment=next_payment(snapshot.debts, today),
        budget=compute_budget(snapshot.monthly_income),
        budget_usage=budget_usage(transactions, today.year, today.month),
    )
