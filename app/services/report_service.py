"""
Report Service
Fetches the entry sets each report needs and hands them to the engine.
"""
from datetime import date
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
import logging

from app.core.exceptions import NotFoundError
from app.repositories.entry_repository import EntryRepository
from app.schemas import DayDetails, DayOfWeekTotals, PeriodSummary, RecentDay, UserStats
from app.services import report_engine
from app.services.date_service import DateService

logger = logging.getLogger("work_ledger.reports")


class ReportService:
    def __init__(self, db: Session):
        self.db = db
        self.entries = EntryRepository(db)

    def weekly_summary(self, user_id: str, start: date, end: date) -> PeriodSummary:
        return report_engine.summarize(self.entries.between(user_id, start, end), start, end)

    def monthly_summary(self, user_id: str, year: int, month: int) -> PeriodSummary:
        start, end = DateService.month_bounds(year, month)
        return report_engine.monthly_summary(self.entries.between(user_id, start, end), year, month)

    def summary_by_day(self, user_id: str, year: int, month: int) -> Dict[str, DayOfWeekTotals]:
        return self.monthly_summary(user_id, year, month).by_day_of_week

    def user_stats(self, user_id: str) -> UserStats:
        return report_engine.stats(self.entries.for_user(user_id))

    def user_stats_filtered(self, user_id: str, start: Optional[date] = None, end: Optional[date] = None) -> UserStats:
        # A single bound is ignored, matching the both-or-nothing filter contract
        if start is None or end is None:
            start = end = None
        return report_engine.stats_filtered(self.entries.for_user(user_id, start, end))

    def day_details(self, day: date, user_id: Optional[str] = None) -> DayDetails:
        details = report_engine.day_details(self.entries.on_day(day, user_id), day)
        if details is None:
            raise NotFoundError(f"No entries found for {day.isoformat()}", {"date": day.isoformat()})
        return details

    def recent_days_summary(self, reference_date: date, days: int, user_id: Optional[str] = None) -> List[RecentDay]:
        logger.debug(f"Building {days}-day summary ending {reference_date} for user {user_id}")
        entries_by_day = {
            day: self.entries.on_day(day, user_id)
            for day in DateService.days_back(reference_date, days)
        }
        return report_engine.recent_days_summary(entries_by_day, reference_date, days)
