"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable
from fastapi.testclient import TestClient
from awareness_engine.api.main import create_app
from awareness_engine.domain.models import (
    Account,
    Debt,
    FinancialSnapshot,
    Institution,
    Subscription,
    Transaction,
)


# Fixed reference date so month windows are deterministic
TODAY = date(2026, 3, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for expense transactions on account 'chk' dated today unless overridden"""
    counter = {"n": 0}

    def _make(**overrides) -> Transaction:
        counter["n"] += 1
        fields = dict(
            id=f"tx_{counter['n']}",
            date=TODAY,
            merchant="Merchant",
            category="Groceries",
            amount=10.0,
            type="expense",
            account_id="chk",
        )
        fields.update(overrides)
        return Transaction(**fields)

    return _make


@pytest.fixture
def make_subscription() -> Callable[..., Subscription]:
    counter = {"n": 0}

    def _make(**overrides) -> Subscription:
        counter["n"] += 1
        fields = dict(
            id=f"sub_{counter['n']}",
            merchant="Streamly",
            monthly_cost=15.0,
            last_charge_date=TODAY,
            status="active",
            category="Entertainment",
            account_id="chk",
        )
        fields.update(overrides)
        return Subscription(**fields)

    return _make


@pytest.fixture
def institutions() -> list[Institution]:
    return [
        Institution(id="i1", name="First Bank"),
        Institution(id="i2", name="Second Credit Union"),
    ]


@pytest.fixture
def accounts() -> list[Account]:
    return [
        Account(id="chk", institution_id="i1", name="Everyday Checking", type="checking", balance=1000.0),
        Account(id="sav", institution_id="i2", name="High Yield Savings", type="savings", balance=500.0),
        Account(id="cc", institution_id="i1", name="Rewards Card", type="credit", balance=-250.0),
    ]


@pytest.fixture
def sample_snapshot(institutions, accounts, make_transaction, make_subscription) -> FinancialSnapshot:
    """
    Two-institution snapshot for March 2026.

    This month: income 3000, expenses 1500 (rent 900, dining 400, utilities 110,
    transfer 90). Last month: utilities 100, groceries 1100.
    """
    transactions = [
        make_transaction(category="Income", amount=3000.0, type="income", date=date(2026, 3, 1)),
        make_transaction(category="Rent", amount=900.0, date=date(2026, 3, 2)),
        make_transaction(category="Dining", amount=400.0, date=date(2026, 3, 5)),
        make_transaction(category="Utilities", amount=110.0, date=date(2026, 3, 6)),
        make_transaction(category="Transfer", amount=90.0, date=date(2026, 3, 7), account_id="sav"),
        make_transaction(category="Utilities", amount=100.0, date=date(2026, 2, 6)),
        make_transaction(category="Groceries", amount=1100.0, date=date(2026, 2, 10)),
        # Orphan: account no longer exists
        make_transaction(category="Dining", amount=5000.0, account_id="closed"),
    ]
    subscriptions = [
        make_subscription(monthly_cost=15.0),
        make_subscription(monthly_cost=10.0, status="trial", account_id="cc"),
        make_subscription(monthly_cost=50.0, status="cancelled"),
    ]
    debts = [
        Debt(id="d1", name="Rewards Card", type="credit", balance=250.0, minimum_payment=35.0, due_day=20),
        Debt(id="d2", name="Car Loan", type="auto", balance=8000.0, minimum_payment=220.0, due_day=5),
        Debt(id="d3", name="Old Loan", type="personal", balance=0.0, status="paid_off"),
    ]
    return FinancialSnapshot(
        institutions=institutions,
        accounts=accounts,
        transactions=transactions,
        subscriptions=subscriptions,
        debts=debts,
        monthly_income=3000.0,
    )
