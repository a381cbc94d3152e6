from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from repairdesk.db import get_db
from repairdesk.schemas.report_schema import (
    DashboardStats,
    FinancialReport,
    ReportPeriod,
    StockReportRow,
)
from repairdesk.services.report_service import ReportService
from repairdesk.utils.clock import parse_bound

router = APIRouter(prefix="/api", tags=["reports"])


@router.get("/reports/financial", response_model=FinancialReport, summary="getFinancialReport")
def financial_report(
    period: ReportPeriod = Query(..., description="label only; does not bucket"),
    start_date: str = Query(..., description="ISO date or datetime, inclusive"),
    end_date: str = Query(..., description="ISO date or datetime, inclusive"),
    db: Session = Depends(get_db),
):
    try:
        start = parse_bound(start_date)
        end = parse_bound(end_date, end_of_day=True)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid date: {e}")
    if start > end:
        raise HTTPException(status_code=422, detail="start_date must not be after end_date")
    return ReportService(db).financial_report(period, start, end)


@router.get("/reports/stock", response_model=List[StockReportRow], summary="getStockReport")
def stock_report(db: Session = Depends(get_db)):
    return ReportService(db).stock_report()


@router.get("/dashboard/stats", response_model=DashboardStats, summary="getDashboardStats")
def dashboard_stats(db: Session = Depends(get_db)):
    return ReportService(db).dashboard_stats()
