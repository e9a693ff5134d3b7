from __future__ import annotations

from datetime import UTC, date, datetime

from simcore.core.time import as_utc, day_key, parse_dt


def test_parse_dt_accepts_z_suffix() -> None:
    dt = parse_dt("2023-01-01T00:00:00Z")
    assert dt.tzinfo == UTC
    assert dt.year == 2023


def test_parse_dt_accepts_bare_date() -> None:
    dt = parse_dt("2023-06-01")
    assert dt == datetime(2023, 6, 1, tzinfo=UTC)


def test_as_utc_coerces_dates_and_naive_datetimes() -> None:
    assert as_utc(date(2023, 1, 1)) == datetime(2023, 1, 1, tzinfo=UTC)
    assert as_utc(datetime(2023, 1, 1, 12)).tzinfo == UTC
    assert day_key(as_utc("2023-01-01T23:59:00Z")) == "2023-01-01"
