"""Unit tests for the category breakdown"""

import pytest

from awareness_engine.domain.spending import OTHER_LABEL, PALETTE, category_breakdown


def test_amounts_are_absolute(make_transaction):
    breakdown = category_breakdown([make_transaction(category="Dining", amount=-50.0)], top_n=5)

    assert breakdown.total == 50.0
    assert len(breakdown.segments) == 1
    assert breakdown.segments[0].name == "Dining"
    assert breakdown.segments[0].amount == 50.0


def test_ranked_descending_with_other_tail(make_transaction):
    expenses = [
        make_transaction(category="Rent", amount=900.0),
        make_transaction(category="Dining", amount=120.0),
        make_transaction(category="Groceries", amount=300.0),
        make_transaction(category="Dining", amount=80.0),
        make_transaction(category="Fuel", amount=40.0),
        make_transaction(category="Books", amount=10.0),
    ]

    breakdown = category_breakdown(expenses, top_n=3)

    assert [(s.name, s.amount) for s in breakdown.segments] == [
        ("Rent", 900.0),
        ("Groceries", 300.0),
        ("Dining", 200.0),
        (OTHER_LABEL, 50.0),
    ]
    assert breakdown.total == 1450.0


def test_colors_cycle_by_rank_and_other_uses_reserved_color(make_transaction):
    expenses = [make_transaction(category=c, amount=a) for c, a in [("A", 30.0), ("B", 20.0), ("C", 10.0)]]

    breakdown = category_breakdown(expenses, top_n=2)

    assert [s.color for s in breakdown.segments] == [PALETTE[0], PALETTE[1], PALETTE[5]]


def test_other_omitted_when_tail_is_empty(make_transaction):
    breakdown = category_breakdown([make_transaction(category="A"), make_transaction(category="B")], top_n=5)

    assert OTHER_LABEL not in [s.name for s in breakdown.segments]


def test_category_labels_are_case_sensitive(make_transaction):
    breakdown = category_breakdown(
        [make_transaction(category="dining"), make_transaction(category="Dining")]
    )

    assert sorted(s.name for s in breakdown.segments) == ["Dining", "dining"]


def test_equal_totals_keep_first_seen_order(make_transaction):
    expenses = [
        make_transaction(category="Zoo", amount=10.0),
        make_transaction(category="Art", amount=10.0),
        make_transaction(category="Mid", amount=10.0),
    ]

    breakdown = category_breakdown(expenses, top_n=2)

    assert [s.name for s in breakdown.segments] == ["Zoo", "Art", OTHER_LABEL]


@pytest.mark.parametrize("top_n", [0, 1, 3, 10])
def test_segments_sum_to_total(make_transaction, top_n):
    expenses = [
        make_transaction(category=f"cat{i % 7}", amount=round(3.17 * (i + 1), 2))
        for i in range(20)
    ]

    breakdown = category_breakdown(expenses, top_n=top_n)

    assert sum(s.amount for s in breakdown.segments) == pytest.approx(breakdown.total)


def test_empty_expenses():
    breakdown = category_breakdown([])

    assert breakdown.total == 0
    assert breakdown.segments == []


def test_repeated_calls_give_equal_breakdowns(make_transaction):
    expenses = [
        make_transaction(category="Rent", amount=900.0),
        make_transaction(category="Dining", amount=120.0),
        make_transaction(category="Fuel", amount=120.0),
    ]

    first = category_breakdown(expenses, top_n=1)

    assert category_breakdown(expenses, top_n=1) == first
    assert [t.amount for t in expenses] == [900.0, 120.0, 120.0]
