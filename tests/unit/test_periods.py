"""Unit tests for period filtering"""

import pytest
from datetime import date, timedelta

from awareness_engine.domain.exceptions import InvalidPeriodError
from awareness_engine.domain.periods import (
    ChartPeriod,
    expense_total,
    expenses_for_period,
    income_in_month,
    last_month_expenses,
    this_month_expenses,
)
from awareness_engine.utils.date_utils import previous_month


def test_this_month_keeps_only_current_calendar_month_expenses(make_transaction, today):
    txns = [
        make_transaction(id="in", date=date(2026, 3, 1)),
        make_transaction(id="end", date=date(2026, 3, 31)),
        make_transaction(id="prev", date=date(2026, 2, 28)),
        make_transaction(id="last_year", date=date(2025, 3, 10)),
        make_transaction(id="income", type="income", date=date(2026, 3, 2)),
    ]

    result = expenses_for_period(txns, ChartPeriod.THIS_MONTH, today=today)

    assert [t.id for t in result] == ["in", "end"]


def test_last_30_days_boundary_is_inclusive(make_transaction, today):
    """A transaction dated exactly today - 30 days is kept"""
    txns = [
        make_transaction(id="boundary", date=today - timedelta(days=30)),
        make_transaction(id="outside", date=today - timedelta(days=31)),
        make_transaction(id="today", date=today),
        make_transaction(id="future", date=today + timedelta(days=1)),
    ]

    result = expenses_for_period(txns, "last_30_days", today=today)

    assert [t.id for t in result] == ["boundary", "today"]


def test_unknown_period_raises(make_transaction, today):
    with pytest.raises(InvalidPeriodError):
        expenses_for_period([make_transaction()], "last_week", today=today)


def test_last_month_wraps_across_year():
    assert previous_month(2026, 1) == (2025, 12)
    assert previous_month(2026, 3) == (2026, 2)


def test_last_month_expenses_in_january(make_transaction):
    january = date(2026, 1, 10)
    txns = [
        make_transaction(id="dec", date=date(2025, 12, 31)),
        make_transaction(id="nov", date=date(2025, 11, 30)),
    ]

    assert [t.id for t in last_month_expenses(txns, today=january)] == ["dec"]
    assert this_month_expenses(txns, today=january) == []


def test_totals_use_absolute_amounts(make_transaction, today):
    txns = [
        make_transaction(amount=-50.0),
        make_transaction(amount=25.0),
        make_transaction(amount=1000.0, type="income"),
    ]

    assert expense_total(txns) == 75.0
    assert income_in_month(txns, today.year, today.month) == 1000.0


@pytest.mark.parametrize("period", list(ChartPeriod))
def test_repeated_calls_give_equal_results(make_transaction, today, period):
    txns = [
        make_transaction(date=date(2026, 3, 1)),
        make_transaction(date=date(2026, 2, 20)),
        make_transaction(type="income", date=date(2026, 3, 2)),
    ]

    first = expenses_for_period(txns, period, today)

    assert expenses_for_period(txns, period, today) == first
    assert len(txns) == 3
