"""Time helpers. Supabase timestamps are UTC; users think in their local day."""

from datetime import date, datetime, time

import pytz

from mannmitra import config


def to_local(ts: datetime, tz=None) -> datetime:
    """Convert a stored timestamp into the app zone. Naive values are read as UTC."""
    if ts.tzinfo is None:
        ts = pytz.utc.localize(ts)
    return ts.astimezone(tz or config.APP_TIMEZONE)


def local_today(tz=None) -> date:
    return datetime.now(tz or config.APP_TIMEZONE).date()


def start_of_day_utc(day: date, tz=None) -> datetime:
    # Local midnight as a UTC instant, for created_at range filters.
    tz = tz or config.APP_TIMEZONE
    return tz.localize(datetime.combine(day, time.min)).astimezone(pytz.utc)
