"""Unit tests for the end-to-end awareness report"""

import pytest

from awareness_engine.domain.awareness import build_awareness_report
from awareness_engine.domain.exceptions import InvalidPeriodError
from awareness_engine.domain.models import FinancialSnapshot, NextPayment


def test_report_over_all_institutions(sample_snapshot, today):
    report = build_awareness_report(sample_snapshot, today=today)

    assert report.visible_account_ids == {"chk", "sav", "cc"}

    # orphaned 5000 dining charge is out of scope
    assert report.spending.total == 1500.0
    assert [s.name for s in report.spending.segments] == ["Rent", "Dining", "Utilities", "Transfer"]

    assert report.cash_control.expenses_this_month == 1500.0
    assert report.cash_control.expenses_last_month == 1200.0
    assert report.cash_control.expenses_change_pct == pytest.approx(25.0)
    assert report.cash_control.status == "moderate"
    assert report.cash_control.combined_score == 37
    assert report.cash_control.filled_segments == 2

    assert report.clarity.score == 80
    assert report.clarity_label == "Strong"
    assert report.clarity_subtext == "Strong visibility and stability."

    assert report.monthly_subscription_total == 25.0
    assert report.annual_subscription_cost == 300.0
    assert report.subscription_load_percent == pytest.approx(25 / 3000 * 100)

    # utilities 110 vs 100 is not above the 1.1x threshold
    assert [(i.type, i.message) for i in report.insights] == [("high_dining_ratio", "Dining 27% of spending.")]

    assert report.total_debt == 8250.0
    assert report.next_payment == NextPayment(name="Rewards Card", amount=35.0, due_day=20)

    assert report.budget.needs_target == pytest.approx(1500.0)
    assert report.budget_usage.needs == 1010.0
    assert report.budget_usage.wants == 400.0
    assert report.budget_usage.savings == 90.0


def test_report_for_single_institution(sample_snapshot, today):
    report = build_awareness_report(sample_snapshot, selected_institution_id="i2", today=today)

    assert report.visible_account_ids == {"sav"}
    assert report.spending.total == 90.0
    assert report.cash_control.balance_current == 500.0
    assert report.monthly_subscription_total == 0
    assert report.clarity.breakdown.visibility == 0
    assert report.clarity.score == 20
    assert report.clarity_label == "Needs attention"
    assert report.clarity_subtext == "Connect more accounts for better visibility."
    assert report.insights == []


def test_report_for_unknown_institution_is_empty(sample_snapshot, today):
    report = build_awareness_report(sample_snapshot, selected_institution_id="gone", today=today)

    assert report.visible_account_ids == set()
    assert report.spending.segments == []
    assert report.insights == []


def test_report_with_rolling_window(sample_snapshot, today):
    report = build_awareness_report(sample_snapshot, period="last_30_days", top_n=1, today=today)

    # Feb 13 onwards: February spend falls outside the window
    assert report.spending.total == 1500.0
    assert [s.name for s in report.spending.segments] == ["Rent", "Other"]


def test_report_rejects_unknown_period(sample_snapshot, today):
    with pytest.raises(InvalidPeriodError):
        build_awareness_report(sample_snapshot, period="fortnight", today=today)


def test_zero_income_snapshot(accounts, institutions, make_subscription, today):
    snapshot = FinancialSnapshot(
        institutions=institutions,
        accounts=accounts,
        subscriptions=[make_subscription(monthly_cost=900.0)],
        monthly_income=0.0,
    )

    report = build_awareness_report(snapshot, today=today)

    assert report.subscription_load_percent is None
    assert "high_subscription_load" not in [i.type for i in report.insights]


def test_report_is_idempotent(sample_snapshot, today):
    assert build_awareness_report(sample_snapshot, today=today) == build_awareness_report(sample_snapshot, today=today)
