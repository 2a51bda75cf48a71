"""
Relative time windows over collision events.
"""
from datetime import datetime, timedelta
from typing import Iterable, Iterator, List, Optional, Tuple

from ..domain.entities import CollisionEvent
from ..domain.defaults import resolve_timestamp
from ...common.logging import setup_logger
from ...common.utils import shift_months, start_of_day, to_local

logger = setup_logger(__name__)

RANGE_TOKENS = ("day", "week", "month", "year")

def iter_timestamped(events: Iterable[CollisionEvent]) -> Iterator[Tuple[CollisionEvent, datetime]]:
    """
    Yields (event, local timestamp) pairs, skipping records without a
    parseable timestamp.
    """
    for event in events:
        timestamp = resolve_timestamp(event)
        if timestamp is None:
            logger.warning(f"Skipping event {event.id!r}: missing or malformed timestamp")
            continue
        yield event, timestamp

def compute_cutoff(time_range: str, now: datetime) -> Optional[datetime]:
    """
    Earliest instant kept for a range token. None means unbounded, which is
    what any token outside RANGE_TOKENS gets.
    """
    now = to_local(now)
    if time_range == "day":
        return start_of_day(now)
    if time_range == "week":
        return now - timedelta(days=7)
    if time_range == "month":
        return shift_months(now, -1)
    if time_range == "year":
        return shift_months(now, -12)
    logger.debug(f"Unrecognized range token {time_range!r}, not filtering")
    return None

def filter_by_range(events: Iterable[CollisionEvent], time_range: str, now: datetime) -> List[CollisionEvent]:
    """
    Events at or after the range cutoff, most recent first.
    The input is left untouched; equal timestamps keep their input order.
    """
    cutoff = compute_cutoff(time_range, now)
    kept = [
        (event, timestamp)
        for event, timestamp in iter_timestamped(events)
        if cutoff is None or timestamp >= cutoff
    ]
    kept.sort(key=lambda pair: pair[1], reverse=True)
    return [event for event, _ in kept]
