# monarch/modules/reports/router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date

from monarch.config.database import get_db
from .service import ReportsService
from .schemas import DailySummaryResponse, MonthlySummaryResponse, DashboardResponse

router = APIRouter(prefix="/reports", tags=["Reports"])

@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    on: Optional[date] = Query(None, description="Day treated as today, defaults to today"),
    db: Session = Depends(get_db)
):
    """
    Rep dashboard

    - Today's sales and per-brand units / revenue
    - Month-to-date sales
    - Today's expenses and net after expenses
    - Top selling brand of the month
    """
    service = ReportsService(db)
    return await service.get_dashboard(on or date.today())

@router.get("/daily", response_model=DailySummaryResponse)
async def get_daily_summary(
    on: Optional[date] = Query(None, description="Day to summarize, defaults to today"),
    db: Session = Depends(get_db)
):
    service = ReportsService(db)
    return await service.get_daily_summary(on or date.today())

@router.get("/monthly", response_model=MonthlySummaryResponse)
async def get_monthly_summary(
    year: Optional[int] = Query(None, ge=2000, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    db: Session = Depends(get_db)
):
    today = date.today()
    service = ReportsService(db)
    return await service.get_monthly_summary(year or today.year, month or today.month)
