"""
sambat.core.table
-----------------
Read-only index over the per-year records: exact lookup by BS year and a
floor lookup by AD start date ("which BS year contains this AD date").
"""

from __future__ import annotations

import bisect
from datetime import date, timedelta
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import DatasetError
from .types import YearRecord


class YearTable:
    """
    Immutable after construction. Construction either validates and indexes the
    whole dataset or raises DatasetError; there is no partially built table.
    """

    def __init__(self, records: Iterable[YearRecord]):
        ordered = sorted(records, key=lambda r: r.ad_start_date)
        if not ordered:
            raise DatasetError("Year table is empty")

        by_year: Dict[int, YearRecord] = {}
        seen_starts: Dict[date, int] = {}
        for rec in ordered:
            if rec.bs_year in by_year:
                raise DatasetError(
                    f"Duplicate BS year {rec.bs_year} in year table",
                    {"bs_year": rec.bs_year},
                )
            if rec.ad_start_date in seen_starts:
                raise DatasetError(
                    f"BS years {seen_starts[rec.ad_start_date]} and {rec.bs_year} "
                    f"share AD start date {rec.ad_start_date}",
                    {"bs_year": rec.bs_year, "ad_start_date": rec.ad_start_date.isoformat()},
                )
            by_year[rec.bs_year] = rec
            seen_starts[rec.ad_start_date] = rec.bs_year

        _check_contiguous(ordered)

        self._by_year = by_year
        self._records: Tuple[YearRecord, ...] = tuple(ordered)
        self._starts: List[date] = [r.ad_start_date for r in ordered]

    # ---------------------------------------------------------
    # Lookups
    # ---------------------------------------------------------

    def by_year(self, bs_year: int) -> Optional[YearRecord]:
        return self._by_year.get(bs_year)

    def containing(self, ad_date: date) -> Optional[YearRecord]:
        """
        Record whose AD span covers `ad_date`, or None.

        Floor lookup on start dates, then the end date is re-checked: a floor
        hit that ends before `ad_date` is treated as out of range.
        """
        i = bisect.bisect_right(self._starts, ad_date) - 1
        if i < 0:
            return None
        rec = self._records[i]
        if ad_date > rec.ad_end_date:
            return None
        return rec

    # ---------------------------------------------------------
    # Introspection
    # ---------------------------------------------------------

    @property
    def first(self) -> YearRecord:
        return self._records[0]

    @property
    def last(self) -> YearRecord:
        return self._records[-1]

    @property
    def years(self) -> Tuple[int, ...]:
        return tuple(r.bs_year for r in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[YearRecord]:
        return iter(self._records)

    def __contains__(self, bs_year: object) -> bool:
        return bs_year in self._by_year

    def __repr__(self) -> str:
        return f"YearTable({self.first.bs_year}..{self.last.bs_year}, {len(self)} years)"


def _check_contiguous(ordered: List[YearRecord]) -> None:
    """Consecutive records must abut exactly, with BS years rising in step."""
    for prev, cur in zip(ordered, ordered[1:]):
        if cur.bs_year <= prev.bs_year:
            raise DatasetError(
                f"BS year {cur.bs_year} starts after BS year {prev.bs_year} in AD order",
                {"bs_year": cur.bs_year, "previous": prev.bs_year},
            )
        expected = prev.ad_end_date + timedelta(days=1)
        if cur.ad_start_date != expected:
            kind = "gap" if cur.ad_start_date > expected else "overlap"
            raise DatasetError(
                f"Year table {kind} between BS {prev.bs_year} (ends {prev.ad_end_date}) "
                f"and BS {cur.bs_year} (starts {cur.ad_start_date})",
                {"bs_year": cur.bs_year, "previous": prev.bs_year, "kind": kind},
            )
