# monarch/modules/reports/aggregation.py
"""
Sales summaries computed from plain order / expense records.

Records are mappings as produced by the order and expense schemas:
orders carry ``order_date``, ``total`` and ``items`` (each with ``name``,
``quantity`` and ``subtotal``); expenses carry ``expense_date`` and ``amount``.
Dates may be ``date`` objects, ISO strings or the ``M/D/YYYY`` form older
clients stored.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional

Record = Mapping[str, Any]

NO_TOP_BRAND = "N/A"


@dataclass
class BrandStat:
    units: int = 0
    revenue: Decimal = Decimal("0")

    def to_dict(self) -> Dict[str, Any]:
        return {"units": self.units, "revenue": float(self.revenue)}


@dataclass
class OrderSummary:
    total: Decimal = Decimal("0")
    order_count: int = 0
    brand_stats: Dict[str, BrandStat] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": float(self.total),
            "order_count": self.order_count,
            "brand_stats": {name: stat.to_dict() for name, stat in self.brand_stats.items()}
        }


def _as_decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    return Decimal(str(value))


def as_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    for fmt in ("%Y-%m-%d", "%m/%d/%Y"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def summarize_orders(orders: Iterable[Record]) -> OrderSummary:
    """
    Sum order totals and accumulate units / revenue per item name.

    A missing total counts as 0. Brand names keep the order in which they
    were first seen.
    """
    summary = OrderSummary()
    for order in orders:
        summary.order_count += 1
        summary.total += _as_decimal(order.get("total"))

        for item in order.get("items") or []:
            stat = summary.brand_stats.setdefault(item["name"], BrandStat())
            stat.units += int(item.get("quantity") or 0)
            stat.revenue += _as_decimal(item.get("subtotal"))

    return summary


def orders_on(orders: Iterable[Record], day: date) -> List[Record]:
    return [o for o in orders if as_date(o.get("order_date")) == day]


def orders_in_month(orders: Iterable[Record], year: int, month: int) -> List[Record]:
    selected = []
    for order in orders:
        order_date = as_date(order.get("order_date"))
        if order_date and order_date.year == year and order_date.month == month:
            selected.append(order)
    return selected


def expenses_total(expenses: Iterable[Record], day: date) -> Decimal:
    return sum(
        (_as_decimal(e.get("amount")) for e in expenses if as_date(e.get("expense_date")) == day),
        Decimal("0")
    )


def top_brand(brand_stats: Mapping[str, BrandStat]) -> str:
    """
    Name with the most units sold; ties go to the brand seen first
    """
    best_name, best_units = NO_TOP_BRAND, None
    for name, stat in brand_stats.items():
        if best_units is None or stat.units > best_units:
            best_name, best_units = name, stat.units
    return best_name
