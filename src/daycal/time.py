# SPDX-License-Identifier: MIT

from typing import Optional, Union

import pendulum

TimezoneLike = Union[str, pendulum.Timezone, pendulum.FixedTimezone]

EPOCH = pendulum.from_timestamp(0, tz="UTC")


def now_in_tz(tz: str = "local") -> pendulum.DateTime:
    return pendulum.now(tz)


def today_in_tz(tz: str = "local") -> pendulum.Date:
    return pendulum.now(tz).date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_date_str(datetime: pendulum.DateTime) -> str:
    """Civil date in the datetime's own offset, 'YYYY-MM-DD'."""
    return datetime.format("YYYY-MM-DD")


def datetime_to_clock_str(datetime: pendulum.DateTime) -> str:
    """24-hour 'HH:mm' in the datetime's own offset."""
    return datetime.format("HH:mm")


def date_to_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a strict 'YYYY-MM-DD' string. Raises ValueError when invalid."""
    return pendulum.from_format(date_str, "YYYY-MM-DD").date()


def datetime_from_rfc3339(value: str) -> pendulum.DateTime:
    """Parse an RFC3339 timestamp keeping its encoded offset."""
    parsed = pendulum.parse(value)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"'{value}' is not a date-time")
    return parsed


def datetime_from_date_str(
    value: str, tz: TimezoneLike = "local"
) -> pendulum.DateTime:
    """Parse a 'YYYY-MM-DD' date as midnight in the given time zone."""
    parsed = pendulum.parse(value, tz=tz)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"'{value}' is not a date")
    return parsed.start_of("day")


def datetime_or_epoch(
    date_time: Optional[str], date: Optional[str], tz: TimezoneLike = "local"
) -> pendulum.DateTime:
    """
    Effective timestamp of an event bound.

    Prefers the date-time field, falls back to the date-only field at midnight.
    Anything unparsable resolves to the Unix epoch instead of raising.
    """
    try:
        if date_time:
            return datetime_from_rfc3339(date_time)
        if date:
            return datetime_from_date_str(date, tz=tz)
    except (ValueError, TypeError, OverflowError):
        return EPOCH
    return EPOCH
