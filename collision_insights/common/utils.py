"""
Date and time helpers shared by the statistics engine.

All bucketing works on naive datetimes in local time. Aware datetimes are
converted to the local zone first and then stripped of their tzinfo.
"""
import calendar
from datetime import datetime, time
from typing import Optional

def to_local(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value

def parse_timestamp(value) -> Optional[datetime]:
    """
    Parses an ISO-8601 string (a trailing 'Z' is accepted) or datetime.
    Returns None when the value is missing or cannot be parsed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None

def start_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min)

def shift_months(value: datetime, months: int) -> datetime:
    """
    Moves a datetime by a number of calendar months, keeping the time of day.
    A day-of-month missing in the target month is clamped to its last day
    (e.g. March 31 minus one month is February 28/29).
    """
    month_index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return value.replace(year=year, month=month, day=min(value.day, last_day))
