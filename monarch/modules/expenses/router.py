# monarch/modules/expenses/router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date

from monarch.config.database import get_db
from .service import ExpensesService
from .schemas import ExpenseCreateRequest, ExpenseResponse, DailyExpensesResponse

router = APIRouter(prefix="/expenses", tags=["Expenses"])

@router.post("", response_model=ExpenseResponse, status_code=201)
async def create_expense(expense_data: ExpenseCreateRequest, db: Session = Depends(get_db)):
    """
    Record an expense, dated today unless a date is given
    """
    service = ExpensesService(db)
    return await service.create_expense(expense_data)

@router.get("", response_model=DailyExpensesResponse)
async def get_expenses(
    on: Optional[date] = Query(None, description="Day to list (YYYY-MM-DD), defaults to today"),
    db: Session = Depends(get_db)
):
    service = ExpensesService(db)
    return await service.get_expenses_by_date(on or date.today())

@router.delete("/{expense_id}")
async def delete_expense(expense_id: int, db: Session = Depends(get_db)):
    service = ExpensesService(db)
    return await service.delete_expense(expense_id)
