# monarch/modules/expenses/service.py
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from monarch.shared.live import publish_collection, to_records
from .repository import ExpensesRepository
from .schemas import ExpenseCreateRequest, ExpenseResponse, DailyExpensesResponse

logger = logging.getLogger(__name__)

class ExpensesService:
    """
    Day-to-day running costs of the rep (fuel, meals, ...)
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = ExpensesRepository(db)

    async def create_expense(
        self,
        expense_data: ExpenseCreateRequest,
        today: Optional[date] = None
    ) -> ExpenseResponse:
        concept = (expense_data.concept or "").strip() or "General"

        try:
            expense = self.repository.create_expense(
                amount=expense_data.amount,
                concept=concept,
                expense_date=expense_data.expense_date or today or date.today()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error saving expense: {str(e)}")

        logger.info(f"Expense {expense.id} saved: {concept} {expense.amount}")
        self._publish_expenses()
        return ExpenseResponse.model_validate(expense)

    async def get_expenses_by_date(self, expense_date: date) -> DailyExpensesResponse:
        rows = self.repository.get_expenses_by_date(expense_date)
        total_amount = sum((Decimal(str(e.amount)) for e in rows), Decimal("0"))

        return DailyExpensesResponse(
            success=True,
            date=expense_date,
            expenses=[ExpenseResponse.model_validate(e) for e in rows],
            total_amount=float(total_amount)
        )

    async def delete_expense(self, expense_id: int) -> Dict[str, Any]:
        expense = self.repository.get_expense_by_id(expense_id)
        if not expense:
            raise HTTPException(status_code=404, detail="Expense not found")

        try:
            self.repository.delete_expense(expense)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise HTTPException(status_code=500, detail=f"Error deleting expense: {str(e)}")

        logger.info(f"Expense deleted: {expense_id}")

        self._publish_expenses()
        return {"success": True, "deleted_id": expense_id}

    def expenses_snapshot(self) -> List[Dict[str, Any]]:
        return to_records(self.repository.get_expenses(), ExpenseResponse)

    def _publish_expenses(self):
        publish_collection("expenses", self.repository.get_expenses(), ExpenseResponse)
