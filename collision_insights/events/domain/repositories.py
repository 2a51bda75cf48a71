"""
Domain repositories for collision events.
"""
from typing import Any, List, Optional, Protocol

from .entities import CollisionEvent

class EventRepository(Protocol):
    """
    Source of collision events. Callers get a full snapshot and do all
    filtering and ordering themselves.
    """
    def get_all(self) -> List[CollisionEvent]:
        ...

    def get(self, event_id: str) -> CollisionEvent:
        ...

    def append(self, event: CollisionEvent) -> CollisionEvent:
        ...

class KeyValueStore(Protocol):
    """
    Minimal get/set storage holding JSON-compatible values.
    """
    def get(self, key: str) -> Optional[Any]:
        ...

    def set(self, key: str, value: Any) -> None:
        ...
