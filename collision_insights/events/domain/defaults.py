"""
Tagged defaults for absent or unrecognised event fields.

Every aggregator resolves fields through these helpers so that a missing
severity, object type or confidence is handled the same way everywhere.
"""
from datetime import datetime
from typing import List, Optional

from .entities import CollisionEvent, DetectedObject
from ...common.utils import to_local

SEVERITIES = ("critical", "high", "medium", "low")
ACCIDENT_SEVERITIES = ("critical", "high")
DISTANCE_STATUSES = ("critical", "warning", "ok")

UNKNOWN_OBJECT_TYPE = "unknown"
DEFAULT_CONFIDENCE = 0.0

def resolve_severity(event: CollisionEvent) -> Optional[str]:
    """Known severity of the event, or None when absent or unrecognised."""
    if event.severity in SEVERITIES:
        return event.severity
    return None

def resolve_timestamp(event: CollisionEvent) -> Optional[datetime]:
    """Event instant as a naive local datetime, or None when malformed."""
    if event.timestamp is None:
        return None
    return to_local(event.timestamp)

def resolve_objects(event: CollisionEvent) -> List[DetectedObject]:
    return list(event.objects or [])

def resolve_object_type(obj: DetectedObject) -> str:
    return obj.type or UNKNOWN_OBJECT_TYPE

def resolve_confidence(obj: DetectedObject) -> float:
    if obj.confidence is None:
        return DEFAULT_CONFIDENCE
    return obj.confidence
