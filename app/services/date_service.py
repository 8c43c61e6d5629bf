from datetime import date, timedelta
from dateutil.relativedelta import relativedelta
from typing import List, Tuple

# Sunday=0 ... Saturday=6
WEEKDAY_NAMES = ("domingo", "segunda", "terça", "quarta", "quinta", "sexta", "sábado")
WEEKDAY_SHORT_NAMES = ("dom", "seg", "ter", "qua", "qui", "sex", "sáb")


class DateService:
    @staticmethod
    def month_bounds(year: int, month: int) -> Tuple[date, date]:
        """First and last calendar day of the month (last = day 0 of the next month)"""
        start_date = date(year, month, 1)
        end_date = start_date + relativedelta(months=1) - timedelta(days=1)
        return start_date, end_date

    @staticmethod
    def weekday_index(day: date) -> int:
        return day.isoweekday() % 7

    @staticmethod
    def weekday_name(day: date) -> str:
        return WEEKDAY_NAMES[DateService.weekday_index(day)]

    @staticmethod
    def weekday_short_name(day: date) -> str:
        return WEEKDAY_SHORT_NAMES[DateService.weekday_index(day)]

    @staticmethod
    def days_back(reference_date: date, days: int) -> List[date]:
        """reference_date, reference_date - 1, ... reference_date - (days - 1)"""
        return [reference_date - timedelta(days=offset) for offset in range(days)]
