# bakery/services/aggregation.py
"""
Aggregations over an in-memory list of transactions.

Everything here is pure: the functions read `date`, `amount`, `type` and
`category` off whatever objects they are given (ORM rows or API schemas)
and never touch the database. "Today" is always passed in, so results are
deterministic for a given input.

Public API:
    filter_by_month(txns, month)          -> list, date desc
    filter_by_type(txns, kind)            -> list
    calculate_stats(txns)                 -> Stats
    calculate_growth(current, previous)   -> float (percent)
    daily_rollup(txns)                    -> list[DailyStat], date desc
    highest_expense_category(txns)        -> (category, total) | None
    growth_vs_yesterday(txns, today)      -> Growth
    build_summary(txns, month, kind, today) -> dict
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple

from models import INCOME, EXPENSE
from bakery.services.month_helpers import get_month_range, today_and_yesterday

TYPE_FILTERS = ("all", INCOME, EXPENSE)


@dataclass
class Stats:
    income: float = 0.0
    expense: float = 0.0
    profit: float = 0.0
    category_totals: Dict[str, Dict[str, float]] = field(
        default_factory=lambda: {INCOME: {}, EXPENSE: {}}
    )
    # Flat category -> sum over expenses only
    all_expense_totals: Dict[str, float] = field(default_factory=dict)


@dataclass
class DailyStat:
    date: date
    income: float = 0.0
    expense: float = 0.0
    profit: float = 0.0


@dataclass
class Growth:
    income: float
    expense: float
    profit: float


# ---- Filters ----

def filter_by_month(txns: Iterable[Any], month: str) -> List[Any]:
    """
    Keep transactions dated inside `month` ('YYYY-MM'), newest first.

    Equal dates keep their input order.
    """
    start, end_exclusive, _ = get_month_range(month)
    selected = [t for t in txns if start <= t.date < end_exclusive]
    return sorted(selected, key=lambda t: t.date, reverse=True)


def filter_by_type(txns: Iterable[Any], kind: str = "all") -> List[Any]:
    if kind not in TYPE_FILTERS:
        raise ValueError(f"type filter must be one of {', '.join(TYPE_FILTERS)}, got {kind!r}")
    if kind == "all":
        return list(txns)
    return [t for t in txns if t.type == kind]


# ---- Totals ----

def calculate_stats(txns: Iterable[Any]) -> Stats:
    income = 0.0
    expense = 0.0
    cat_totals: Dict[str, Dict[str, float]] = {INCOME: {}, EXPENSE: {}}
    all_expense_totals: Dict[str, float] = {}

    for t in txns:
        amt = t.amount
        if t.type == INCOME:
            income += amt
            cat_totals[INCOME][t.category] = cat_totals[INCOME].get(t.category, 0) + amt
        else:
            expense += amt
            cat_totals[EXPENSE][t.category] = cat_totals[EXPENSE].get(t.category, 0) + amt
            all_expense_totals[t.category] = all_expense_totals.get(t.category, 0) + amt

    return Stats(
        income=income,
        expense=expense,
        profit=income - expense,
        category_totals=cat_totals,
        all_expense_totals=all_expense_totals,
    )


def calculate_growth(current: float, previous: float) -> float:
    """
    Percent change from `previous` to `current`.

    A zero `previous` has no meaningful ratio: the result is then 0 when
    `current` is also zero and a flat 100 otherwise.
    """
    if previous == 0:
        return 0 if current == 0 else 100
    return ((current - previous) / previous) * 100


def daily_rollup(txns: Iterable[Any]) -> List[DailyStat]:
    days: Dict[date, DailyStat] = {}
    for t in txns:
        day = days.get(t.date)
        if day is None:
            day = days[t.date] = DailyStat(date=t.date)
        if t.type == INCOME:
            day.income += t.amount
            day.profit += t.amount
        else:
            day.expense += t.amount
            day.profit -= t.amount
    return sorted(days.values(), key=lambda d: d.date, reverse=True)


def highest_expense_category(txns: Iterable[Any]) -> Optional[Tuple[str, float]]:
    """Largest expense category by summed amount; ties go to the first one seen."""
    totals = calculate_stats(txns).all_expense_totals
    if not totals:
        return None
    return max(totals.items(), key=lambda item: item[1])


def growth_vs_yesterday(txns: Iterable[Any], today: date) -> Growth:
    today, yesterday = today_and_yesterday(today)
    txns = list(txns)
    today_stats = calculate_stats(t for t in txns if t.date == today)
    yesterday_stats = calculate_stats(t for t in txns if t.date == yesterday)
    return Growth(
        income=calculate_growth(today_stats.income, yesterday_stats.income),
        expense=calculate_growth(today_stats.expense, yesterday_stats.expense),
        profit=calculate_growth(today_stats.profit, yesterday_stats.profit),
    )


# ---- Dashboard view ----

def build_summary(
    txns: Iterable[Any],
    month: str,
    kind: str,
    today: date,
) -> Dict[str, Any]:
    """
    Everything the dashboard shows for one month, in one pass over `txns`.

    Totals, the daily rollup and the top category follow the month only;
    the type filter narrows the listed transactions. Growth cards always
    compare today with yesterday across the full list.
    """
    txns = list(txns)
    in_month = filter_by_month(txns, month)
    stats = calculate_stats(in_month)
    top = highest_expense_category(in_month)

    return {
        "month": month,
        "type": kind,
        "transactions": filter_by_type(in_month, kind),
        "stats": {
            "income": stats.income,
            "expense": stats.expense,
            "profit": stats.profit,
            "category_totals": stats.category_totals,
        },
        "daily": [asdict(d) for d in daily_rollup(in_month)],
        "highest_expense_category": (
            {"category": top[0], "amount": top[1]} if top else None
        ),
        "growth": asdict(growth_vs_yesterday(txns, today)),
    }
