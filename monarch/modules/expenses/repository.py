# monarch/modules/expenses/repository.py
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session

from monarch.shared.database.models import Expense

class ExpensesRepository:
    def __init__(self, db: Session):
        self.db = db

    def create_expense(self, amount, concept: str, expense_date: date) -> Expense:
        expense = Expense(amount=amount, concept=concept, expense_date=expense_date)

        self.db.add(expense)
        self.db.commit()
        self.db.refresh(expense)

        return expense

    def get_expenses(self) -> List[Expense]:
        return self.db.query(Expense).order_by(Expense.id).all()

    def get_expenses_by_date(self, expense_date: date) -> List[Expense]:
        return self.db.query(Expense).filter(
            Expense.expense_date == expense_date
        ).order_by(Expense.id).all()

    def get_expense_by_id(self, expense_id: int) -> Optional[Expense]:
        return self.db.query(Expense).filter(Expense.id == expense_id).first()

    def delete_expense(self, expense: Expense):
        self.db.delete(expense)
        self.db.commit()
