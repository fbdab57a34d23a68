from datetime import date

import pytest

from bakery.services.aggregation import (
    build_summary,
    calculate_growth,
    calculate_stats,
    daily_rollup,
    filter_by_month,
    filter_by_type,
    growth_vs_yesterday,
    highest_expense_category,
)
from factories import Tx


@pytest.fixture
def may_txns():
    return [
        Tx(1, "2024-05-01", 450, "income", "Counter Sales"),
        Tx(2, "2024-05-01", 120, "expense", "Ingredients"),
        Tx(3, "2024-05-03", 85.5, "expense", "Ingredients"),
        Tx(4, "2024-05-02", 200, "income", "Wholesale"),
        Tx(5, "2024-04-30", 60, "expense", "Utilities"),
        Tx(6, "2024-06-01", 75, "expense", "Packaging"),
    ]


def test_calculate_stats_empty():
    stats = calculate_stats([])
    assert stats.income == 0
    assert stats.expense == 0
    assert stats.profit == 0
    assert stats.category_totals == {"income": {}, "expense": {}}
    assert stats.all_expense_totals == {}


def test_calculate_stats_example_scenario():
    txns = [
        Tx(1, "2024-05-01", 450, "income", "Counter Sales"),
        Tx(2, "2024-05-01", 120, "expense", "Ingredients"),
    ]
    stats = calculate_stats(txns)
    assert (stats.income, stats.expense, stats.profit) == (450, 120, 330)
    assert stats.category_totals == {
        "income": {"Counter Sales": 450},
        "expense": {"Ingredients": 120},
    }

    days = daily_rollup(txns)
    assert len(days) == 1
    assert days[0].date == date(2024, 5, 1)
    assert (days[0].income, days[0].expense, days[0].profit) == (450, 120, 330)


def test_profit_is_exactly_income_minus_expense(may_txns):
    odd = may_txns + [Tx(7, "2024-05-04", 0.1, "income"), Tx(8, "2024-05-04", 0.2, "expense")]
    stats = calculate_stats(odd)
    assert stats.profit == stats.income - stats.expense


def test_category_totals_accumulate_per_type(may_txns):
    stats = calculate_stats(may_txns)
    assert stats.category_totals["expense"]["Ingredients"] == pytest.approx(205.5)
    assert stats.category_totals["income"] == {"Counter Sales": 450, "Wholesale": 200}


def test_same_category_name_is_tracked_separately_per_type():
    stats = calculate_stats([
        Tx(1, "2024-05-01", 10, "income", "Other"),
        Tx(2, "2024-05-01", 4, "expense", "Other"),
    ])
    assert stats.category_totals["income"]["Other"] == 10
    assert stats.category_totals["expense"]["Other"] == 4


def test_arbitrary_categories_are_accepted():
    stats = calculate_stats([Tx(1, "2024-05-01", 12, "expense", "Tip jar mishap")])
    assert stats.category_totals["expense"] == {"Tip jar mishap": 12}


@pytest.mark.parametrize(
    "current, previous, expected",
    [
        (0, 0, 0),
        (100, 0, 100),
        (-40, 0, 100),
        (150, 100, 50),
        (50, 100, -50),
        (100, 100, 0),
    ],
)
def test_calculate_growth(current, previous, expected):
    assert calculate_growth(current, previous) == expected


def test_filter_by_month_orders_newest_first(may_txns):
    result = filter_by_month(may_txns, "2024-05")
    assert [t.id for t in result] == [3, 4, 1, 2]


def test_filter_by_month_is_idempotent(may_txns):
    once = filter_by_month(may_txns, "2024-05")
    twice = filter_by_month(once, "2024-05")
    assert [t.id for t in twice] == [t.id for t in once]


def test_filter_by_month_rejects_bad_token(may_txns):
    with pytest.raises(ValueError):
        filter_by_month(may_txns, "May 2024")
    with pytest.raises(ValueError):
        filter_by_month(may_txns, "2024-13")


def test_filter_by_type(may_txns):
    assert [t.id for t in filter_by_type(may_txns, "income")] == [1, 4]
    assert len(filter_by_type(may_txns, "expense")) == 4
    assert len(filter_by_type(may_txns, "all")) == len(may_txns)
    with pytest.raises(ValueError):
        filter_by_type(may_txns, "refund")


def test_daily_rollup_groups_and_sorts(may_txns):
    days = daily_rollup(filter_by_month(may_txns, "2024-05"))
    assert [d.date for d in days] == [date(2024, 5, 3), date(2024, 5, 2), date(2024, 5, 1)]
    assert days[0].profit == -85.5
    assert days[1].profit == 200
    assert days[2].profit == 330


def test_daily_rollup_totals_match_overall_stats(may_txns):
    days = daily_rollup(may_txns)
    stats = calculate_stats(may_txns)
    assert sum(d.income for d in days) == pytest.approx(stats.income)
    assert sum(d.expense for d in days) == pytest.approx(stats.expense)
    assert sum(d.profit for d in days) == pytest.approx(stats.profit)


def test_highest_expense_category(may_txns):
    assert highest_expense_category(may_txns) == ("Ingredients", 205.5)
    assert highest_expense_category([Tx(1, "2024-05-01", 5, "income")]) is None
    assert highest_expense_category([]) is None


def test_highest_expense_category_tie_keeps_first_seen():
    txns = [
        Tx(1, "2024-05-02", 50, "expense", "Labor"),
        Tx(2, "2024-05-01", 50, "expense", "Utilities"),
    ]
    assert highest_expense_category(txns) == ("Labor", 50)


def test_growth_vs_yesterday():
    today = date(2024, 5, 2)
    txns = [
        Tx(1, "2024-05-02", 150, "income"),
        Tx(2, "2024-05-02", 30, "expense"),
        Tx(3, "2024-05-01", 100, "income"),
        Tx(4, "2024-04-20", 999, "income"),
    ]
    growth = growth_vs_yesterday(txns, today)
    assert growth.income == 50
    # nothing spent yesterday
    assert growth.expense == 100
    # profit 120 vs 100
    assert growth.profit == pytest.approx(20)


def test_growth_vs_yesterday_with_no_activity():
    growth = growth_vs_yesterday([], date(2024, 5, 2))
    assert (growth.income, growth.expense, growth.profit) == (0, 0, 0)


def test_build_summary(may_txns):
    summary = build_summary(may_txns, "2024-05", "expense", date(2024, 5, 3))

    assert summary["month"] == "2024-05"
    assert [t.id for t in summary["transactions"]] == [3, 2]
    # totals ignore the type filter
    assert summary["stats"]["income"] == 650
    assert summary["stats"]["expense"] == pytest.approx(205.5)
    assert len(summary["daily"]) == 3
    assert summary["highest_expense_category"] == {"category": "Ingredients", "amount": 205.5}
    # 85.5 expense today, none yesterday
    assert summary["growth"]["expense"] == 100
    assert summary["growth"]["income"] == -100


def test_filter_by_month_bounds_are_inclusive_start_exclusive_end():
    txns = [
        Tx(1, "2023-11-30", 1, "income"),
        Tx(2, "2023-12-01", 1, "income"),
        Tx(3, "2023-12-31", 1, "income"),
        Tx(4, "2024-01-01", 1, "income"),
    ]
    assert [t.id for t in filter_by_month(txns, "2023-12")] == [3, 2]
