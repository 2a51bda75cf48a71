"""
Domain entities for collision events.

Records arrive from the store with camelCase keys (``roadType``, ``subType``,
``objectId1``); attributes are snake_case and both spellings are accepted.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ...common.utils import parse_timestamp

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class EventModel(CamelModel):
    """
    Base for stored records: immutable, unknown keys are kept as extras.
    """
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="allow"
    )

def non_string_as_none(value):
    # Category labels outside the string vocabulary are treated as unrecognised.
    return value if value is None or isinstance(value, str) else None

class Location(EventModel):
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    road_type: Optional[str] = None

    @field_validator("road_type", mode="before")
    @classmethod
    def road_type_as_label(cls, value):
        return non_string_as_none(value)

class DetectedObject(EventModel):
    """
    An object detected in a collision frame.
    """
    id: Optional[str] = None
    type: Optional[str] = None  # vehicle, pedestrian, animal, unknown, ...
    sub_type: Optional[str] = None
    confidence: Optional[float] = None  # 0.0 - 1.0, not range-checked
    position: Optional[Dict[str, Any]] = None
    speed: Optional[float] = None

    @field_validator("id", mode="before")
    @classmethod
    def numeric_id_as_str(cls, value):
        return str(value) if isinstance(value, (int, float)) else value

    @field_validator("type", "sub_type", mode="before")
    @classmethod
    def type_as_label(cls, value):
        return non_string_as_none(value)

class ObjectDistance(EventModel):
    """
    Distance between two detected objects of the same event.
    """
    object_id1: Optional[str] = None
    object_id2: Optional[str] = None
    distance: float
    status: Optional[str] = None  # critical, warning, ok

    @field_validator("object_id1", "object_id2", mode="before")
    @classmethod
    def numeric_id_as_str(cls, value):
        return str(value) if isinstance(value, (int, float)) else value

    @field_validator("status", mode="before")
    @classmethod
    def status_as_label(cls, value):
        return non_string_as_none(value)

class CollisionEvent(EventModel):
    """
    A single detected incident record.

    ``timestamp`` is None when the stored value is missing or not ISO-8601;
    such records load but are left out of every time-based statistic.
    """
    id: Optional[str] = None
    timestamp: Optional[datetime] = None
    severity: Optional[str] = None
    location: Optional[Location] = None
    objects: List[DetectedObject] = Field(default_factory=list)
    distances: List[ObjectDistance] = Field(default_factory=list)
    weather: Optional[Dict[str, Any]] = None
    analysis: Optional[Dict[str, Any]] = None
    images: Optional[Any] = None

    @field_validator("id", mode="before")
    @classmethod
    def numeric_id_as_str(cls, value):
        return str(value) if isinstance(value, (int, float)) else value

    @field_validator("severity", mode="before")
    @classmethod
    def severity_as_label(cls, value):
        return non_string_as_none(value)

    @field_validator("timestamp", mode="before")
    @classmethod
    def parse_timestamp_value(cls, value):
        return parse_timestamp(value)

    @field_validator("objects", "distances", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value

    def to_record(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys, as written to the store."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
