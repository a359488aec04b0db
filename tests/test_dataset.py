# tests/test_dataset.py

import pytest
import logging
from datetime import date

from sambat import dataset
from sambat.core.engine import ConversionEngine
from sambat.core.errors import DatasetError

HEADER = "bs_year,ad_start_date," + ",".join(dataset.MONTH_COLUMNS)
ROW_2057 = "2057,2000-04-13,31,32,31,32,31,30,30,30,29,29,30,31"
ROW_2058 = "2058,2001-04-14,30,32,31,32,31,30,30,30,29,30,29,31"


def write_csv(tmp_path, *lines, name="years.csv"):
    p = tmp_path / name
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return p


@pytest.fixture(autouse=True)
def no_env_override(monkeypatch):
    monkeypatch.delenv(dataset.ENV_VAR, raising=False)


def test_packaged_table():
    recs = dataset.load_year_records()
    assert len(recs) == 86
    assert recs[0].bs_year == 2000
    assert recs[0].ad_start_date == date(1943, 4, 14)
    assert recs[-1].bs_year == 2085
    assert recs[-1].ad_end_date == date(2029, 4, 13)
    for rec in recs:
        assert len(rec.month_lengths) == 12
        assert 354 <= rec.days_in_year <= 366


def test_packaged_table_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="sambat.dataset"):
        dataset.load_year_records()
    assert "Loaded 86 BS year records" in caplog.text


def test_explicit_path(tmp_path):
    p = write_csv(tmp_path, HEADER, ROW_2057, ROW_2058)
    recs = dataset.load_year_records(p)
    assert [r.bs_year for r in recs] == [2057, 2058]
    eng = ConversionEngine.from_records(recs)
    assert eng.max_supported_ad_date() == date(2002, 4, 13)


def test_env_override(tmp_path, monkeypatch):
    p = write_csv(tmp_path, HEADER, ROW_2057)
    monkeypatch.setenv(dataset.ENV_VAR, str(p))
    recs = dataset.load_year_records()
    assert [r.bs_year for r in recs] == [2057]


def test_explicit_path_beats_env(tmp_path, monkeypatch):
    monkeypatch.setenv(dataset.ENV_VAR, str(tmp_path / "missing.csv"))
    p = write_csv(tmp_path, HEADER, ROW_2058)
    assert [r.bs_year for r in dataset.load_year_records(p)] == [2058]


def test_broken_env_override_does_not_fall_back(tmp_path, monkeypatch):
    monkeypatch.setenv(dataset.ENV_VAR, str(tmp_path / "missing.csv"))
    with pytest.raises(DatasetError, match="Cannot read year table"):
        dataset.load_year_records()


def test_missing_header_column(tmp_path):
    p = write_csv(tmp_path, HEADER.replace(",chaitra", ""), ROW_2057.rsplit(",", 1)[0])
    with pytest.raises(DatasetError, match="missing columns"):
        dataset.load_year_records(p)


@pytest.mark.parametrize("row, msg", [
    ("2057,2000-04-13,31,32,31,32,31,30,30,30,29,29,30,x", "not an integer"),
    ("2057,2000-13-13,31,32,31,32,31,30,30,30,29,29,30,31", "not an ISO-8601 date"),
    ("2057,2000-04-13,31,32,31,32,31,30,30,30,29,29,30", "missing columns"),
    ("2057,2000-04-13,31,32,31,32,31,30,30,30,29,29,30,0", "positive integer"),
    ("2057,2000-04-13,31,32,31,32,31,30,30,30,29,29,30,40", "outside 354..366"),
])
def test_bad_rows(tmp_path, row, msg):
    p = write_csv(tmp_path, HEADER, ROW_2058, row)
    with pytest.raises(DatasetError, match=msg) as ei:
        dataset.load_year_records(p)
    assert ei.value.details["row"] == 3


def test_gap_in_file_fails_engine_construction(tmp_path):
    row_2059 = "2059,2002-04-15,31,31,32,31,31,31,30,29,30,29,30,30"
    p = write_csv(tmp_path, HEADER, ROW_2057, ROW_2058, row_2059)
    with pytest.raises(DatasetError, match="gap"):
        ConversionEngine.default(p)


def test_parse_year_rows_in_memory():
    rows = [dict(zip(HEADER.split(","), ROW_2057.split(",")))]
    (rec,) = dataset.parse_year_rows(rows)
    assert rec.bs_year == 2057
    assert rec.month_lengths[-1] == 31


def test_non_utf8_file_is_a_dataset_error(tmp_path):
    p = tmp_path / "latin1.csv"
    p.write_bytes((HEADER + "\n" + ROW_2057 + "\n").encode("ascii") + b"\xff\n")
    with pytest.raises(DatasetError, match="Cannot read year table"):
        dataset.load_year_records(p)
