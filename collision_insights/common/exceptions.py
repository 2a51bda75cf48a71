class CollisionInsightsError(Exception):
    """Base exception for all collision insights errors."""
    pass

class EventNotFoundError(CollisionInsightsError):
    """Raised when a collision event id is not present in the store."""

    def __init__(self, event_id: str):
        super().__init__(f"Event not found: {event_id}")
        self.event_id = event_id

class StoreError(CollisionInsightsError):
    """Raised when the event store cannot be read or written."""
    pass

class ConfigurationError(CollisionInsightsError):
    """Raised when configuration is invalid."""
    pass
