"""
Identity assignment for newly stored events.
"""
from datetime import datetime
from typing import Iterable

from ..domain.entities import CollisionEvent

def next_event_id(now: datetime, existing_ids: Iterable[str]) -> str:
    """
    Millisecond epoch of ``now`` as a string, bumped past the largest numeric
    id already in use so ids keep increasing.
    """
    candidate = int(now.timestamp() * 1000)
    numeric = [int(event_id) for event_id in existing_ids if event_id and event_id.isdigit()]
    if numeric and candidate <= max(numeric):
        candidate = max(numeric) + 1
    return str(candidate)

def with_identity(event: CollisionEvent, now: datetime, existing_ids: Iterable[str]) -> CollisionEvent:
    """Copy of the event with id and timestamp filled in when absent."""
    update = {}
    if not event.id:
        update["id"] = next_event_id(now, existing_ids)
    if event.timestamp is None:
        update["timestamp"] = now
    return event.model_copy(update=update) if update else event
