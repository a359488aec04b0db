"""
sambat.dataset

Loads the per-year month-length table.

The package ships a snapshot table:
  sambat/data/bs_years.csv
with one row per BS year:
  bs_year,ad_start_date,baisakh,jestha,...,chaitra

Source resolution:
  1) explicit `path` argument
  2) $SAMBAT_YEAR_TABLE
  3) packaged data

The first source that applies is the only one read. A broken override is an
error, never a silent fallback to the packaged table.
"""

from __future__ import annotations

import csv
import importlib
import importlib.resources
import logging
import os
from datetime import date
from os import PathLike
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, TextIO, Union

from .core.errors import DatasetError
from .core.types import YearRecord

logger = logging.getLogger(__name__)

ENV_VAR = "SAMBAT_YEAR_TABLE"
DATA_PACKAGE = "sambat.data"
DATA_FILE = "bs_years.csv"

MONTH_COLUMNS = (
    "baisakh", "jestha", "asar", "shrawan", "bhadra", "ashwin",
    "kartik", "mangsir", "poush", "magh", "falgun", "chaitra",
)
REQUIRED_COLUMNS = ("bs_year", "ad_start_date") + MONTH_COLUMNS


def _int(row: Mapping[str, str], col: str, lineno: int) -> int:
    raw = (row.get(col) or "").strip()
    try:
        return int(raw)
    except ValueError:
        raise DatasetError(f"Row {lineno}: column {col!r} is not an integer: {raw!r}", {"row": lineno}) from None


def parse_year_rows(rows: Iterable[Mapping[str, str]]) -> List[YearRecord]:
    """Turn CSV dict rows into YearRecords. Row numbers in errors count the header as 1."""
    out: List[YearRecord] = []
    for lineno, row in enumerate(rows, start=2):
        missing = [c for c in REQUIRED_COLUMNS if c not in row or row[c] is None]
        if missing:
            raise DatasetError(f"Row {lineno}: missing columns {missing}", {"row": lineno})

        bs_year = _int(row, "bs_year", lineno)
        raw_start = row["ad_start_date"].strip()
        try:
            start = date.fromisoformat(raw_start)
        except ValueError:
            raise DatasetError(
                f"Row {lineno}: ad_start_date {raw_start!r} is not an ISO-8601 date",
                {"row": lineno, "bs_year": bs_year},
            ) from None

        lengths = tuple(_int(row, c, lineno) for c in MONTH_COLUMNS)
        try:
            out.append(YearRecord(bs_year, start, lengths))
        except DatasetError as e:
            raise DatasetError(f"Row {lineno}: {e}", {"row": lineno, **e.details}) from e
    return out


def read_year_csv(f: TextIO) -> List[YearRecord]:
    reader = csv.DictReader(f)
    header = reader.fieldnames or []
    missing = [c for c in REQUIRED_COLUMNS if c not in header]
    if missing:
        raise DatasetError(f"Year table header is missing columns {missing}")
    return parse_year_rows(reader)


def load_year_records(path: Optional[Union[str, PathLike]] = None) -> List[YearRecord]:
    """
    Load the year table. Raises DatasetError on any I/O or format problem.
    """
    if path is None:
        env = os.environ.get(ENV_VAR, "").strip()
        if env:
            path = env

    if path is not None:
        p = Path(path).expanduser()
        try:
            with p.open("r", encoding="utf-8", newline="") as f:
                records = read_year_csv(f)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise DatasetError(f"Cannot read year table {p}: {e}", {"path": str(p)}) from e
        source = str(p)
    else:
        try:
            pkg = importlib.import_module(DATA_PACKAGE)
            res = importlib.resources.files(pkg).joinpath(DATA_FILE)
            with res.open("r", encoding="utf-8", newline="") as f:
                records = read_year_csv(f)
        except (ImportError, OSError, UnicodeDecodeError, csv.Error) as e:
            raise DatasetError(f"Packaged year table {DATA_PACKAGE}/{DATA_FILE} is unavailable: {e}") from e
        source = f"{DATA_PACKAGE}/{DATA_FILE}"

    logger.debug("Loaded %d BS year records from %s", len(records), source)
    return records
