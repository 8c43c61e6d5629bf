"""
Reports Router
Weekly/monthly summaries, statistics, day details and recent-days rollups.
"""
from fastapi import APIRouter, Depends, Query
from datetime import date
from typing import Dict, List, Optional

from app import schemas
from app.config import settings
from app.core.dependencies import get_entry_service, get_report_service, get_today
from app.core.security import require_api_token
from app.services.entry_service import EntryService
from app.services.report_service import ReportService

router = APIRouter(
    prefix="/entries",
    tags=["Reports"],
    dependencies=[Depends(require_api_token)],
    responses={404: {"description": "Not found"}},
)


@router.get("/reports/weekly", response_model=schemas.PeriodSummary)
def get_weekly_summary(
    user_id: str = Query(..., alias="userId"),
    start: date = Query(..., description="First day of the period (YYYY-MM-DD)"),
    end: date = Query(..., description="Last day of the period, inclusive"),
    service: ReportService = Depends(get_report_service)
):
    """Totals and weekday breakdown for an arbitrary period"""
    return service.weekly_summary(user_id, start, end)


@router.get("/reports/monthly", response_model=schemas.PeriodSummary)
def get_monthly_summary(
    user_id: str = Query(..., alias="userId"),
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    service: ReportService = Depends(get_report_service)
):
    return service.monthly_summary(user_id, year, month)


@router.get("/reports/stats/{user_id}", response_model=schemas.UserStats)
def get_user_stats(
    user_id: str,
    service: ReportService = Depends(get_report_service)
):
    """Totals, averages and best/worst day across every entry of the user"""
    return service.user_stats(user_id)


@router.get("/reports/recent/{user_id}", response_model=List[schemas.RecentEntry])
def get_recent_entries(
    user_id: str,
    limit: int = Query(settings.recent_entries_default, ge=1, le=1000),
    entry_service: EntryService = Depends(get_entry_service)
):
    return entry_service.recent_entries(user_id, limit)


@router.get("/reports/by-day/{user_id}", response_model=Dict[str, schemas.DayOfWeekTotals])
def get_summary_by_day(
    user_id: str,
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    today: date = Depends(get_today),
    service: ReportService = Depends(get_report_service)
):
    """Weekday breakdown of a month (defaults to the current month)"""
    return service.summary_by_day(user_id, year or today.year, month or today.month)


@router.get("/stats/{user_id}/filtered", response_model=schemas.UserStats)
def get_user_stats_filtered(
    user_id: str,
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    service: ReportService = Depends(get_report_service)
):
    """Statistics restricted to [startDate, endDate] when both are given"""
    return service.user_stats_filtered(user_id, start_date, end_date)


@router.get("/day/details", response_model=schemas.DayDetails)
def get_day_details(
    day: date = Query(..., alias="date", description="Calendar day (YYYY-MM-DD)"),
    user_id: Optional[str] = Query(None, alias="userId"),
    service: ReportService = Depends(get_report_service)
):
    """All entries of one day rolled up; 404 when the day has none"""
    return service.day_details(day, user_id)


@router.get("/recent/summary", response_model=List[schemas.RecentDay])
def get_recent_days_summary(
    days: int = Query(settings.recent_days_default, ge=1, le=settings.recent_days_max),
    user_id: Optional[str] = Query(None, alias="userId"),
    today: date = Depends(get_today),
    service: ReportService = Depends(get_report_service)
):
    return service.recent_days_summary(today, days, user_id)
