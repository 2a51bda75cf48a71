"""
Daily event counts over a fixed number of days.
"""
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Union

from ..domain.entities import CollisionEvent
from ..domain.statistics import TrendPoint
from ...common.utils import to_local
from .time_window import iter_timestamped

DEFAULT_TREND_DAYS = 10

def generate_trend(
    events: Iterable[CollisionEvent],
    days: int = DEFAULT_TREND_DAYS,
    today: Optional[Union[date, datetime]] = None,
) -> List[TrendPoint]:
    """
    Returns ``days`` points, oldest first, the last one being ``today``.

    Each point counts the events of that local calendar day. Events before
    the first day or after ``today`` are ignored.
    """
    if days < 1:
        raise ValueError(f"days must be at least 1, got {days}")

    if today is None:
        today = datetime.now()
    if isinstance(today, datetime):
        today = to_local(today).date()

    first_day = today - timedelta(days=days - 1)
    counts = [0] * days

    for _, timestamp in iter_timestamped(events):
        index = (timestamp.date() - first_day).days
        if 0 <= index < days:
            counts[index] += 1

    return [
        TrendPoint(date=first_day + timedelta(days=offset), count=count)
        for offset, count in enumerate(counts)
    ]
