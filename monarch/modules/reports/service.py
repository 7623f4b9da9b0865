# monarch/modules/reports/service.py
import calendar
from datetime import date
from typing import Any, Dict, List, Tuple
from fastapi import HTTPException
from sqlalchemy.orm import Session

from monarch.modules.orders.schemas import OrderResponse
from monarch.modules.expenses.schemas import ExpenseResponse
from .aggregation import summarize_orders, orders_on, orders_in_month, expenses_total, top_brand
from .repository import ReportsRepository
from .schemas import DailySummaryResponse, MonthlySummaryResponse, DashboardResponse

def month_bounds(year: int, month: int) -> Tuple[date, date]:
    if not 1 <= month <= 12:
        raise HTTPException(status_code=400, detail="Month must be between 1 and 12")
    return date(year, month, 1), date(year, month, calendar.monthrange(year, month)[1])

class ReportsService:
    """
    Daily and monthly sales summaries. Nothing here is stored; every figure
    is recomputed from the orders and expenses on each call.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = ReportsRepository(db)

    def _order_records(self, start: date, end: date) -> List[Dict[str, Any]]:
        return [
            OrderResponse.model_validate(o).model_dump()
            for o in self.repository.get_orders_between(start, end)
        ]

    def _expense_records(self, start: date, end: date) -> List[Dict[str, Any]]:
        return [
            ExpenseResponse.model_validate(e).model_dump()
            for e in self.repository.get_expenses_between(start, end)
        ]

    async def get_daily_summary(self, day: date) -> DailySummaryResponse:
        summary = summarize_orders(orders_on(self._order_records(day, day), day))
        spent = expenses_total(self._expense_records(day, day), day)

        return DailySummaryResponse(
            success=True,
            date=day,
            summary=summary.to_dict(),
            expenses=float(spent),
            net=float(summary.total - spent)
        )

    async def get_monthly_summary(self, year: int, month: int) -> MonthlySummaryResponse:
        start, end = month_bounds(year, month)
        summary = summarize_orders(orders_in_month(self._order_records(start, end), year, month))

        return MonthlySummaryResponse(
            success=True,
            year=year,
            month=month,
            summary=summary.to_dict(),
            top_brand=top_brand(summary.brand_stats)
        )

    async def get_dashboard(self, today: date) -> DashboardResponse:
        """
        Today's and this month's sales, today's expenses, net and top brand
        """
        start, end = month_bounds(today.year, today.month)
        orders = self._order_records(start, end)

        day_summary = summarize_orders(orders_on(orders, today))
        month_summary = summarize_orders(orders_in_month(orders, today.year, today.month))
        spent = expenses_total(self._expense_records(today, today), today)

        return DashboardResponse(
            success=True,
            date=today,
            today=day_summary.to_dict(),
            month=month_summary.to_dict(),
            today_expenses=float(spent),
            net=float(day_summary.total - spent),
            top_brand=top_brand(month_summary.brand_stats)
        )
