"""Day-granularity date helpers.

All values are timezone-naive ``pd.Timestamp`` objects that denote UTC.
"""

from __future__ import annotations

from typing import Union

import pandas as pd

DateLike = Union[str, pd.Timestamp]

ONE_DAY = pd.Timedelta(days=1)


def utc_now() -> pd.Timestamp:
    """Return the current instant in UTC (timezone-naive)."""

    return pd.Timestamp.now(tz="UTC").tz_localize(None)


def parse_calendar_date(iso_date: str) -> pd.Timestamp:
    """Parse ``YYYY-MM-DD`` as UTC midnight."""

    return pd.Timestamp(f"{iso_date}T00:00:00")


def truncate_to_day(date: DateLike) -> pd.Timestamp:
    """Zero the time-of-day components in UTC."""

    ts = pd.Timestamp(date)
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts.normalize()


def add_days(date: pd.Timestamp, days: int) -> pd.Timestamp:
    return pd.Timestamp(date) + days * ONE_DAY


def day_difference(start: pd.Timestamp, end: pd.Timestamp) -> int:
    """Return ``end - start`` in whole days, rounded to the nearest day."""

    return int(round((pd.Timestamp(end) - pd.Timestamp(start)) / ONE_DAY))


def to_iso_date(date: DateLike) -> str:
    return truncate_to_day(date).strftime("%Y-%m-%d")


def is_weekend(date: pd.Timestamp) -> bool:
    # 토요일(5), 일요일(6)
    return pd.Timestamp(date).dayofweek >= 5
