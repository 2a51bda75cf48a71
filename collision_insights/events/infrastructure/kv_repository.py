from datetime import datetime
from typing import Any, Callable, Dict, List

from pydantic import ValidationError

from ..domain.entities import CollisionEvent
from ..domain.repositories import KeyValueStore
from .identity import with_identity
from ...common.exceptions import EventNotFoundError, StoreError
from ...common.logging import setup_logger

logger = setup_logger(__name__)

EVENTS_KEY = "ugandaSafe_events"

class KeyValueEventRepository:
    """
    Keeps every event as one JSON list under a single store key, newest
    first. Records that fail validation are skipped with a warning.
    """
    def __init__(
        self,
        store: KeyValueStore,
        key: str = EVENTS_KEY,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.key = key
        self.clock = clock

    def initialize(self) -> None:
        """Writes an empty event list when the key is missing or empty."""
        if not self.store.get(self.key):
            self.store.set(self.key, [])

    def _records(self) -> List[Dict[str, Any]]:
        records = self.store.get(self.key)
        if records is None:
            return []
        if not isinstance(records, list):
            raise StoreError(f"Expected a list under '{self.key}', got {type(records).__name__}")
        return records

    @staticmethod
    def _to_event(record: Any):
        try:
            return CollisionEvent.model_validate(record)
        except ValidationError as e:
            record_id = record.get("id") if isinstance(record, dict) else None
            logger.warning(f"Skipping invalid event record {record_id!r}: {e.error_count()} error(s)")
            return None

    def get_all(self) -> List[CollisionEvent]:
        events = []
        for record in self._records():
            event = self._to_event(record)
            if event is not None:
                events.append(event)
        return events

    def get(self, event_id: str) -> CollisionEvent:
        for event in self.get_all():
            if event.id == event_id:
                return event
        raise EventNotFoundError(event_id)

    def append(self, event: CollisionEvent) -> CollisionEvent:
        records = self._records()
        existing_ids = [str(r.get("id")) for r in records if isinstance(r, dict) and r.get("id") is not None]
        created = with_identity(event, self.clock(), existing_ids)
        self.store.set(self.key, [created.to_record()] + records)
        return created
