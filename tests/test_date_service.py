import pytest
from datetime import date

from app.services.date_service import DateService


@pytest.mark.parametrize("year, month, last_day", [
    (2024, 2, date(2024, 2, 29)),
    (2023, 2, date(2023, 2, 28)),
    (2024, 4, date(2024, 4, 30)),
    (2024, 12, date(2024, 12, 31)),
])
def test_month_bounds(year, month, last_day):
    start, end = DateService.month_bounds(year, month)
    assert start == date(year, month, 1)
    assert end == last_day


def test_weekday_names_start_on_sunday():
    assert DateService.weekday_name(date(2024, 5, 5)) == "domingo"
    assert DateService.weekday_name(date(2024, 5, 6)) == "segunda"
    assert DateService.weekday_name(date(2024, 5, 11)) == "sábado"
    assert DateService.weekday_short_name(date(2024, 5, 8)) == "qua"


def test_days_back_crosses_month_boundary():
    assert DateService.days_back(date(2024, 3, 1), 3) == [date(2024, 3, 1), date(2024, 2, 29), date(2024, 2, 28)]
