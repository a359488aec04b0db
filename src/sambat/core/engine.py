"""
sambat.core.engine
------------------
AD <-> BS conversion over a YearTable. Every method is a pure read of the
table, so one engine can be shared freely between threads.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from os import PathLike
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from .errors import InvalidBsDateError, InvalidStateError, OutOfRangeError
from .table import YearTable
from .types import BsDate, BsMonth, MonthLike, YearRecord


def _as_date(d: date) -> date:
    if isinstance(d, datetime):
        return d.date()
    if not isinstance(d, date):
        raise TypeError(f"Expected datetime.date, got {type(d).__name__}")
    return d


class ConversionEngine:
    def __init__(self, table: YearTable):
        self.table = table
        first, last = table.first, table.last
        self._min_ad = first.ad_start_date
        self._max_ad = last.ad_end_date
        self._min_bs = BsDate(first.bs_year, BsMonth.BAISAKH, 1)
        self._max_bs = BsDate(last.bs_year, BsMonth.CHAITRA, last.month_length(BsMonth.CHAITRA))

    @classmethod
    def from_records(cls, records: Iterable[YearRecord]) -> "ConversionEngine":
        return cls(YearTable(records))

    @classmethod
    def default(cls, path: Optional[Union[str, PathLike]] = None) -> "ConversionEngine":
        """Engine over the bundled table (or `path` / $SAMBAT_YEAR_TABLE)."""
        from ..dataset import load_year_records
        return cls.from_records(load_year_records(path))

    # ---------------------------------------------------------
    # Forward: AD -> BS
    # ---------------------------------------------------------

    def to_bs(self, ad_date: date) -> BsDate:
        ad_date = _as_date(ad_date)
        rec = self.table.containing(ad_date)
        if rec is None:
            raise OutOfRangeError(
                f"AD date {ad_date} is outside the supported range "
                f"{self._min_ad}..{self._max_ad}",
                {"ad_date": ad_date.isoformat()},
            )

        offset = (ad_date - rec.ad_start_date).days
        for i, length in enumerate(rec.month_lengths):
            if offset < length:
                return BsDate(rec.bs_year, BsMonth(i + 1), offset + 1)
            offset -= length

        # containing() already checked ad_end_date, so only a record whose
        # month lengths disagree with its own span can get here
        raise InvalidStateError(
            f"AD date {ad_date} overruns the months of BS year {rec.bs_year}",
            {"ad_date": ad_date.isoformat(), "bs_year": rec.bs_year},
        )

    # ---------------------------------------------------------
    # Inverse: BS -> AD
    # ---------------------------------------------------------

    def to_ad(self, bs_date: BsDate) -> date:
        rec = self._record(bs_date.year)
        length = rec.month_length(bs_date.month)
        if not 1 <= bs_date.day <= length:
            raise InvalidBsDateError(
                f"Invalid day {bs_date.day} for {bs_date.month.display_name} {bs_date.year} "
                f"(month has {length} days)",
                {"bs_date": bs_date.format(), "month_length": length},
            )
        offset = rec.month_start_offset(bs_date.month) + bs_date.day - 1
        return rec.ad_start_date + timedelta(days=offset)

    def _record(self, bs_year: int) -> YearRecord:
        rec = self.table.by_year(bs_year)
        if rec is None:
            raise OutOfRangeError(
                f"BS year {bs_year} is not supported by the year table "
                f"({self._min_bs.year}..{self._max_bs.year})",
                {"bs_year": bs_year},
            )
        return rec

    # ---------------------------------------------------------
    # Range queries
    # ---------------------------------------------------------

    def min_supported_ad_date(self) -> date:
        return self._min_ad

    def max_supported_ad_date(self) -> date:
        return self._max_ad

    def min_supported_bs_date(self) -> BsDate:
        return self._min_bs

    def max_supported_bs_date(self) -> BsDate:
        return self._max_bs

    def supported_years(self) -> Tuple[int, ...]:
        return self.table.years

    # ---------------------------------------------------------
    # Derived helpers
    # ---------------------------------------------------------

    def is_valid(self, bs_date: BsDate) -> bool:
        rec = self.table.by_year(bs_date.year)
        return rec is not None and 1 <= bs_date.day <= rec.month_length(bs_date.month)

    def days_in_month(self, year: int, month: MonthLike) -> int:
        return self._record(year).month_length(month)

    def month_bounds(self, year: int, month: MonthLike) -> Tuple[date, date]:
        """First and last AD dates of a BS month."""
        month = BsMonth.from_value(month)
        first = self.to_ad(BsDate(year, month, 1))
        return first, first + timedelta(days=self.days_in_month(year, month) - 1)

    def new_year_day(self, year: int) -> date:
        return self._record(year).ad_start_date

    def add_days(self, bs_date: BsDate, days: int) -> BsDate:
        return self.to_bs(self.to_ad(bs_date) + timedelta(days=days))

    def days_between(self, start: BsDate, end: BsDate) -> int:
        """Signed number of days from `start` to `end`."""
        return (self.to_ad(end) - self.to_ad(start)).days

    def info(self) -> Dict[str, Any]:
        return {
            "years": (self._min_bs.year, self._max_bs.year),
            "records": len(self.table),
            "min_ad": self._min_ad.isoformat(),
            "max_ad": self._max_ad.isoformat(),
            "min_bs": self._min_bs.format(),
            "max_bs": self._max_bs.format(),
        }
