from datetime import date
from decimal import Decimal

from monarch.modules.reports.aggregation import (
    summarize_orders, orders_on, orders_in_month, expenses_total, top_brand, as_date, NO_TOP_BRAND
)


def make_order(order_date, total, *items):
    return {
        "order_date": order_date,
        "total": total,
        "items": [{"name": n, "quantity": q, "subtotal": s} for n, q, s in items]
    }


ORDERS = [
    make_order(date(2024, 3, 5), 1050, ("Pepsi", 5, 750), ("7Up", 1, 300)),
    make_order(date(2024, 3, 5), 300, ("7Up", 1, 300)),
    make_order(date(2024, 3, 20), 1500, ("Pepsi", 10, 1500)),
    make_order(date(2024, 4, 1), 150, ("Pepsi", 1, 150)),
]


def test_summarize_sums_totals_and_brand_stats():
    summary = summarize_orders(ORDERS[:2])

    assert summary.total == Decimal("1350")
    assert summary.order_count == 2
    assert summary.brand_stats["Pepsi"].units == 5
    assert summary.brand_stats["Pepsi"].revenue == Decimal("750")
    assert summary.brand_stats["7Up"].units == 2
    assert summary.brand_stats["7Up"].revenue == Decimal("600")


def test_brand_stats_keep_first_seen_order():
    summary = summarize_orders([ORDERS[1], ORDERS[0]])
    assert list(summary.brand_stats) == ["7Up", "Pepsi"]


def test_missing_total_counts_as_zero():
    summary = summarize_orders([{"order_date": date(2024, 3, 5), "items": []}, {"total": None}])
    assert summary.total == Decimal("0")
    assert summary.order_count == 2


def test_empty_summary():
    summary = summarize_orders([])
    assert summary.to_dict() == {"total": 0.0, "order_count": 0, "brand_stats": {}}


def test_orders_on_filters_by_day():
    assert orders_on(ORDERS, date(2024, 3, 5)) == ORDERS[:2]
    assert orders_on(ORDERS, date(2024, 3, 6)) == []


def test_orders_in_month_checks_year_and_month():
    assert orders_in_month(ORDERS, 2024, 3) == ORDERS[:3]
    assert orders_in_month(ORDERS, 2023, 3) == []


def test_dates_accept_iso_and_legacy_strings():
    assert as_date("2024-03-05") == date(2024, 3, 5)
    assert as_date("3/5/2024") == date(2024, 3, 5)
    assert as_date("not a date") is None
    legacy = [make_order("3/5/2024", 10, ("Pepsi", 1, 10))]
    assert orders_on(legacy, date(2024, 3, 5)) == legacy


def test_expenses_total_only_counts_the_day():
    expenses = [
        {"expense_date": date(2024, 3, 5), "amount": 200},
        {"expense_date": date(2024, 3, 5), "amount": "50.5"},
        {"expense_date": date(2024, 3, 6), "amount": 999},
    ]
    assert expenses_total(expenses, date(2024, 3, 5)) == Decimal("250.5")


def test_top_brand_by_units():
    summary = summarize_orders(orders_in_month(ORDERS, 2024, 3))
    assert top_brand(summary.brand_stats) == "Pepsi"


def test_top_brand_tie_goes_to_first_seen():
    summary = summarize_orders([make_order(date(2024, 3, 5), 0, ("7Up", 2, 0), ("Pepsi", 2, 0))])
    assert top_brand(summary.brand_stats) == "7Up"


def test_top_brand_without_sales():
    assert top_brand({}) == NO_TOP_BRAND
