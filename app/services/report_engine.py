"""
Reporting Engine
Pure reductions that turn ledger entries into report records.

Every function takes entries that were already fetched and filtered by the
caller (any objects exposing the ``Entry`` model attributes) and returns the
typed records from ``app.schemas``. Nothing here touches the database or the
wall clock.
"""
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from app.schemas import (
    DayDetails,
    DayHighlight,
    DayOfWeekTotals,
    EntryResponse,
    Period,
    PeriodSummary,
    PeriodTotals,
    RecentDay,
    StatsAverages,
    StatsTotals,
    UserStats,
    ZERO,
)
from app.services.date_service import DateService


def _money(value) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _sum(entries: Iterable, field: str) -> Decimal:
    return sum((_money(getattr(e, field)) for e in entries), ZERO)


def summarize(entries: Sequence, start: date, end: date) -> PeriodSummary:
    """Totals plus a per-weekday breakdown for entries inside ``[start, end]``.

    Weekday groups are keyed by the *stored* ``day_of_week`` label, in the
    order each label is first seen; labels absent from the input are absent
    from the result.
    """
    totals = PeriodTotals()
    by_day: Dict[str, DayOfWeekTotals] = {}

    for entry in entries:
        gross, expenses, net = _money(entry.gross_amount), _money(entry.expenses), _money(entry.net_amount)
        totals.total_gross += gross
        totals.total_expenses += expenses
        totals.total_net += net

        bucket = by_day.setdefault(entry.day_of_week, DayOfWeekTotals())
        bucket.gross_amount += gross
        bucket.expenses += expenses
        bucket.net_amount += net
        bucket.count += 1

    return PeriodSummary(
        entries=[EntryResponse.model_validate(e) for e in entries],
        totals=totals,
        by_day_of_week=by_day,
        days_count=len(entries),
        period=Period(start=start, end=end),
    )


def monthly_summary(entries: Sequence, year: int, month: int) -> PeriodSummary:
    start, end = DateService.month_bounds(year, month)
    return summarize(entries, start, end)


def _highlight(entry) -> DayHighlight:
    # Label is derived from the date, never taken from the stored field
    return DayHighlight(
        date=entry.date,
        day_of_week=DateService.weekday_name(entry.date),
        gross_amount=_money(entry.gross_amount),
        expenses=_money(entry.expenses),
        net_amount=_money(entry.net_amount),
    )


def stats(entries: Sequence) -> UserStats:
    """Totals, averages and best/worst day by net amount.

    Ties for best or worst keep the first entry in input order.
    """
    count = len(entries)
    if count == 0:
        return UserStats(totals=StatsTotals(), averages=StatsAverages())

    totals = StatsTotals(
        entries=count,
        gross_amount=_sum(entries, "gross_amount"),
        expenses=_sum(entries, "expenses"),
        net_amount=_sum(entries, "net_amount"),
    )
    averages = StatsAverages(
        gross_amount=totals.gross_amount / count,
        expenses=totals.expenses / count,
        net_amount=totals.net_amount / count,
    )

    # max()/min() return the first of several equal extremes
    best = max(entries, key=lambda e: _money(e.net_amount))
    worst = min(entries, key=lambda e: _money(e.net_amount))

    return UserStats(
        totals=totals,
        averages=averages,
        best_day=_highlight(best),
        worst_day=_highlight(worst),
    )


def stats_filtered(entries: Sequence) -> UserStats:
    """Same as :func:`stats`; the caller has already applied its date bounds."""
    return stats(entries)


def day_details(entries: Sequence, day: date) -> Optional[DayDetails]:
    """Roll up the entries of one calendar day, or ``None`` when there are none."""
    if not entries:
        return None

    total_gross = _sum(entries, "gross_amount")
    total_expenses = _sum(entries, "expenses")
    descriptions = [e.description for e in entries if e.description]

    return DayDetails(
        date=day.strftime("%Y-%m-%d"),
        total_gross_amount=total_gross,
        total_expenses=total_expenses,
        total_net_amount=total_gross - total_expenses,
        description=", ".join(descriptions) if descriptions else None,
        entries_count=len(entries),
        entries=[EntryResponse.model_validate(e) for e in entries],
    )


def recent_days_summary(entries_by_day: Mapping[date, Sequence], reference_date: date, days: int) -> List[RecentDay]:
    """One record per day from ``reference_date`` backwards, most recent first.

    ``entries_by_day`` maps a calendar day to that day's entries in query
    order; days missing from the mapping count as empty.
    """
    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise ValueError(f"days must be a positive integer, got {days!r}")

    summary = []
    for day in DateService.days_back(reference_date, days):
        day_entries = entries_by_day.get(day) or []
        record = RecentDay(
            date=day,
            day_of_week=DateService.weekday_name(day),
            day_of_week_short=DateService.weekday_short_name(day),
        )
        if day_entries:
            record.total_gross_amount = _sum(day_entries, "gross_amount")
            record.total_expenses = _sum(day_entries, "expenses")
            record.total_net_amount = record.total_gross_amount - record.total_expenses
            record.entries_count = len(day_entries)
            record.has_entries = True
            record.preview_description = day_entries[0].description or None
        summary.append(record)

    return summary
