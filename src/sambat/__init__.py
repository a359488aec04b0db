"""sambat public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Build the default engine on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_bs,
    to_ad,
    is_valid,
    min_supported_ad_date,
    max_supported_ad_date,
    supported_years,
    engine_info,
    get_engine,
    set_engine,
    days_in_month,
    month_bounds,
    new_year_day,
    first_day_of_month,
    last_day_of_month,
    add_days,
    days_between,
)
from .core.engine import ConversionEngine
from .core.errors import (
    SambatError,
    ConversionError,
    OutOfRangeError,
    InvalidBsDateError,
    InvalidStateError,
    DatasetError,
)
from .core.table import YearTable
from .core.types import BsDate, BsMonth, YearRecord

__all__ = [
    "to_bs",
    "to_ad",
    "is_valid",
    "min_supported_ad_date",
    "max_supported_ad_date",
    "supported_years",
    "engine_info",
    "get_engine",
    "set_engine",
    "days_in_month",
    "month_bounds",
    "new_year_day",
    "first_day_of_month",
    "last_day_of_month",
    "add_days",
    "days_between",
    "ConversionEngine",
    "YearTable",
    "BsDate",
    "BsMonth",
    "YearRecord",
    "SambatError",
    "ConversionError",
    "OutOfRangeError",
    "InvalidBsDateError",
    "InvalidStateError",
    "DatasetError",
]
