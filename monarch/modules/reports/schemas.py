from pydantic import BaseModel, Field
from typing import Dict
from datetime import date

class BrandStatResponse(BaseModel):
    units: int
    revenue: float

class SummaryResponse(BaseModel):
    total: float
    order_count: int
    brand_stats: Dict[str, BrandStatResponse] = Field(
        ..., description="Item name -> units and revenue, in first-sold order"
    )

class DailySummaryResponse(BaseModel):
    success: bool
    date: date
    summary: SummaryResponse
    expenses: float
    net: float

class MonthlySummaryResponse(BaseModel):
    success: bool
    year: int
    month: int
    summary: SummaryResponse
    top_brand: str

class DashboardResponse(BaseModel):
    success: bool
    date: date
    today: SummaryResponse
    month: SummaryResponse
    today_expenses: float
    net: float = Field(..., description="Today's sales minus today's expenses")
    top_brand: str = Field(..., description="Most units sold this month")
