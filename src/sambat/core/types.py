from __future__ import annotations
import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import IntEnum
from typing import Tuple, Union

from .errors import DatasetError

MIN_YEAR_DAYS = 354
MAX_YEAR_DAYS = 366

_MONTH_NAMES = (
    "Baisakh", "Jestha", "Asar", "Shrawan", "Bhadra", "Ashwin",
    "Kartik", "Mangsir", "Poush", "Magh", "Falgun", "Chaitra",
)

# Alternate romanizations seen in almanacs and other converters.
_MONTH_ALIASES = {
    "vaisakh": 1, "baishakh": 1, "baisakh": 1,
    "jeth": 2, "jeshtha": 2, "jestha": 2, "jyestha": 2,
    "asar": 3, "ashadh": 3, "asadh": 3, "ashar": 3,
    "shrawan": 4, "saun": 4, "sawan": 4,
    "bhadra": 5, "bhadau": 5,
    "ashwin": 6, "aswin": 6, "asoj": 6,
    "kartik": 7, "kattik": 7,
    "mangsir": 8, "marga": 8, "mansir": 8,
    "poush": 9, "push": 9, "paush": 9, "pus": 9,
    "magh": 10,
    "falgun": 11, "phalgun": 11, "fagun": 11,
    "chaitra": 12, "chait": 12, "chaitr": 12,
}

_BS_DATE_RE = re.compile(r"^\s*(\d{1,4})[-/](\d{1,2})[-/](\d{1,2})\s*$")


class BsMonth(IntEnum):
    BAISAKH = 1
    JESTHA = 2
    ASAR = 3
    SHRAWAN = 4
    BHADRA = 5
    ASHWIN = 6
    KARTIK = 7
    MANGSIR = 8
    POUSH = 9
    MAGH = 10
    FALGUN = 11
    CHAITRA = 12

    @property
    def display_name(self) -> str:
        return _MONTH_NAMES[self.value - 1]

    @classmethod
    def from_value(cls, value: int) -> "BsMonth":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 12:
            raise ValueError(f"BS month must be 1-12, got {value!r}")
        return cls(value)

    @classmethod
    def from_name(cls, name: str) -> "BsMonth":
        key = name.strip().lower()
        if key not in _MONTH_ALIASES:
            raise ValueError(f"Unknown BS month name {name!r}. Known: {', '.join(_MONTH_NAMES)}")
        return cls(_MONTH_ALIASES[key])


MonthLike = Union[BsMonth, int]


@dataclass(frozen=True, order=True)
class BsDate:
    year: int
    month: BsMonth
    day: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "month", BsMonth.from_value(self.month))

    @classmethod
    def fromisoformat(cls, s: str) -> "BsDate":
        """Parse ``YYYY-MM-DD`` (or ``YYYY/MM/DD``). Month length is not checked here."""
        m = _BS_DATE_RE.match(s)
        if m is None:
            raise ValueError(f"Invalid BS date string {s!r}; expected YYYY-MM-DD")
        y, mo, d = (int(g) for g in m.groups())
        return cls(y, mo, d)

    def format(self) -> str:
        return f"{self.year:04d}-{self.month.value:02d}-{self.day:02d}"

    isoformat = format

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class YearRecord:
    """One BS year: the AD date of Baisakh 1 and the lengths of its 12 months."""
    bs_year: int
    ad_start_date: date
    month_lengths: Tuple[int, ...]
    days_in_year: int = field(init=False, compare=False)
    ad_end_date: date = field(init=False, compare=False)

    def __post_init__(self) -> None:
        lengths = tuple(self.month_lengths)
        if len(lengths) != 12:
            raise DatasetError(
                f"BS year {self.bs_year}: expected 12 month lengths, got {len(lengths)}",
                {"bs_year": self.bs_year},
            )
        for i, n in enumerate(lengths, start=1):
            if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
                raise DatasetError(
                    f"BS year {self.bs_year}: month {i} length must be a positive integer, got {n!r}",
                    {"bs_year": self.bs_year, "month": i},
                )
        total = sum(lengths)
        if not MIN_YEAR_DAYS <= total <= MAX_YEAR_DAYS:
            raise DatasetError(
                f"BS year {self.bs_year}: {total} days is outside {MIN_YEAR_DAYS}..{MAX_YEAR_DAYS}",
                {"bs_year": self.bs_year, "days_in_year": total},
            )
        if not isinstance(self.ad_start_date, date):
            raise DatasetError(
                f"BS year {self.bs_year}: ad_start_date must be a date, got {self.ad_start_date!r}",
                {"bs_year": self.bs_year},
            )
        start = self.ad_start_date
        if isinstance(start, datetime):
            # keep only the calendar day
            start = start.date()
            object.__setattr__(self, "ad_start_date", start)
        object.__setattr__(self, "month_lengths", lengths)
        object.__setattr__(self, "days_in_year", total)
        object.__setattr__(self, "ad_end_date", start + timedelta(days=total - 1))

    def month_length(self, month: MonthLike) -> int:
        return self.month_lengths[BsMonth.from_value(month) - 1]

    def month_start_offset(self, month: MonthLike) -> int:
        """Days from Baisakh 1 to day 1 of `month`."""
        return sum(self.month_lengths[: BsMonth.from_value(month) - 1])
