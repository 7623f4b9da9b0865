# monarch/modules/reports/repository.py
from datetime import date
from typing import List
from sqlalchemy.orm import Session, selectinload

from monarch.shared.database.models import Order, Expense

class ReportsRepository:
    """
    Read-only queries feeding the sales summaries
    """

    def __init__(self, db: Session):
        self.db = db

    def get_orders_between(self, start: date, end: date) -> List[Order]:
        return self.db.query(Order).options(
            selectinload(Order.items)
        ).filter(
            Order.order_date >= start,
            Order.order_date <= end
        ).order_by(Order.id).all()

    def get_expenses_between(self, start: date, end: date) -> List[Expense]:
        return self.db.query(Expense).filter(
            Expense.expense_date >= start,
            Expense.expense_date <= end
        ).order_by(Expense.id).all()
