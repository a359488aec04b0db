from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Tuple

from .core.engine import ConversionEngine
from .core.types import BsDate, MonthLike

_engine: Optional[ConversionEngine] = None

def set_engine(engine: ConversionEngine) -> None:
    global _engine
    _engine = engine

def get_engine() -> ConversionEngine:
    if _engine is None:
        raise RuntimeError("Default conversion engine not initialized")
    return _engine

def to_bs(d: date) -> BsDate:
    return get_engine().to_bs(d)

def to_ad(b: BsDate) -> date:
    return get_engine().to_ad(b)

def is_valid(b: BsDate) -> bool:
    return get_engine().is_valid(b)

def min_supported_ad_date() -> date:
    return get_engine().min_supported_ad_date()

def max_supported_ad_date() -> date:
    return get_engine().max_supported_ad_date()

def supported_years() -> Tuple[int, ...]:
    return get_engine().supported_years()

def engine_info() -> Dict[str, Any]:
    return get_engine().info()

# ============================================================
# Month / year helpers
# ============================================================

def days_in_month(year: int, month: MonthLike) -> int:
    return get_engine().days_in_month(year, month)

def month_bounds(year: int, month: MonthLike) -> Tuple[date, date]:
    return get_engine().month_bounds(year, month)

def new_year_day(year: int) -> date:
    """AD date of Baisakh 1 of BS `year`."""
    return get_engine().new_year_day(year)

def first_day_of_month(year: int, month: MonthLike) -> date:
    return month_bounds(year, month)[0]

def last_day_of_month(year: int, month: MonthLike) -> date:
    return month_bounds(year, month)[1]

def add_days(b: BsDate, days: int) -> BsDate:
    return get_engine().add_days(b, days)

def days_between(start: BsDate, end: BsDate) -> int:
    return get_engine().days_between(start, end)
