from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from datetime import datetime, date
from decimal import Decimal

class ExpenseCreateRequest(BaseModel):
    amount: Decimal = Field(..., gt=0, description="Amount spent")
    concept: Optional[str] = Field(None, max_length=255, description="What it was for")
    expense_date: Optional[date] = Field(None, description="Defaults to today")

class ExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    amount: float
    concept: str
    expense_date: date
    created_at: Optional[datetime]

class DailyExpensesResponse(BaseModel):
    success: bool
    date: date
    expenses: List[ExpenseResponse]
    total_amount: float
