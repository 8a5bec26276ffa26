from datetime import date, datetime, timedelta, timezone

from smartfarm.utils.time import coerce_datetime, days_between, utc_now


def test_coerce_datetime_parses_z_suffix():
    dt = coerce_datetime("2026-01-01T00:00:00Z")
    assert dt is not None
    assert dt.tzinfo is not None
    assert dt.utcoffset() == timedelta(0)
    assert dt.isoformat().endswith("+00:00")


def test_coerce_datetime_parses_offset():
    dt = coerce_datetime("2026-01-01T02:00:00+02:00")
    assert dt is not None
    assert dt.tzinfo is not None
    assert dt.utcoffset() == timedelta(0)
    assert dt.hour == 0


def test_coerce_datetime_parses_naive_as_utc():
    dt = coerce_datetime("2026-01-01T00:00:00")
    assert dt is not None
    assert dt.tzinfo is not None
    assert dt.utcoffset() == timedelta(0)

    time_diff = utc_now() - dt
    assert isinstance(time_diff, timedelta)


def test_coerce_datetime_accepts_dates():
    dt = coerce_datetime(date(2026, 3, 15))
    assert dt == datetime(2026, 3, 15, tzinfo=timezone.utc)


def test_coerce_datetime_rejects_garbage():
    assert coerce_datetime("next tuesday") is None
    assert coerce_datetime(12345) is None
    assert coerce_datetime(None) is None


def test_days_between_is_fractional_and_signed():
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert days_between(start, start + timedelta(hours=36)) == 1.5
    assert days_between(start + timedelta(days=2), start) == -2
