from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, Dict, List, Optional
from datetime import date as _date, datetime
from decimal import Decimal

# Money is exact in Python and a plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

ZERO = Decimal("0")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _truncate_to_date(v):
    """Accept a datetime (or ISO datetime string) and keep only its calendar day"""
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, str) and "T" in v:
        return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
    return v


# ============================================================================
# User Schemas
# ============================================================================

class UserCreate(CamelModel):
    email: str = Field(..., min_length=3)
    name: str = Field(..., min_length=1)
    password: str


class UserResponse(CamelModel):
    id: str
    email: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ============================================================================
# Entry Schemas
# ============================================================================

class EntryCreate(CamelModel):
    date: _date
    day_of_week: str = Field(..., min_length=1)
    gross_amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    expenses: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    description: Optional[str] = None
    user_id: str

    @field_validator('date', mode='before')
    @classmethod
    def normalize_date(cls, v):
        return _truncate_to_date(v)


class EntryUpdate(CamelModel):
    date: Optional[_date] = None
    day_of_week: Optional[str] = Field(None, min_length=1)
    gross_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    expenses: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    description: Optional[str] = None

    @field_validator('date', mode='before')
    @classmethod
    def normalize_date(cls, v):
        return _truncate_to_date(v)


class EntryOwner(CamelModel):
    id: str
    name: str
    email: str


class EntryResponse(CamelModel):
    id: str
    date: _date
    day_of_week: str
    gross_amount: Money
    expenses: Money
    net_amount: Money
    description: Optional[str] = None
    user_id: str
    user: Optional[EntryOwner] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RecentEntry(CamelModel):
    id: str
    date: _date
    day_of_week: str
    gross_amount: Money
    expenses: Money
    net_amount: Money
    description: Optional[str] = None


class PageMeta(CamelModel):
    total: int
    skip: int
    take: int


class EntryPage(CamelModel):
    entries: List[EntryResponse]
    meta: PageMeta


# ============================================================================
# Report Schemas
# ============================================================================

class PeriodTotals(CamelModel):
    total_gross: Money = ZERO
    total_expenses: Money = ZERO
    total_net: Money = ZERO


class DayOfWeekTotals(CamelModel):
    gross_amount: Money = ZERO
    expenses: Money = ZERO
    net_amount: Money = ZERO
    count: int = 0


class Period(CamelModel):
    start: _date
    end: _date


class PeriodSummary(CamelModel):
    entries: List[EntryResponse] = []
    totals: PeriodTotals
    by_day_of_week: Dict[str, DayOfWeekTotals]
    days_count: int
    period: Period


class StatsTotals(CamelModel):
    entries: int = 0
    gross_amount: Money = ZERO
    expenses: Money = ZERO
    net_amount: Money = ZERO


class StatsAverages(CamelModel):
    gross_amount: Money = ZERO
    expenses: Money = ZERO
    net_amount: Money = ZERO


class DayHighlight(CamelModel):
    date: _date
    day_of_week: str
    gross_amount: Money
    expenses: Money
    net_amount: Money


class UserStats(CamelModel):
    totals: StatsTotals
    averages: StatsAverages
    best_day: Optional[DayHighlight] = None
    worst_day: Optional[DayHighlight] = None


class DayDetails(CamelModel):
    date: str  # YYYY-MM-DD
    total_gross_amount: Money
    total_expenses: Money
    total_net_amount: Money
    description: Optional[str] = None
    entries_count: int
    entries: List[EntryResponse]


class RecentDay(CamelModel):
    date: _date
    day_of_week: str
    day_of_week_short: str
    total_gross_amount: Money = ZERO
    total_expenses: Money = ZERO
    total_net_amount: Money = ZERO
    entries_count: int = 0
    has_entries: bool = False
    preview_description: Optional[str] = None
