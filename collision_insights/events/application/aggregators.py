"""
Bucket counts over a snapshot of collision events.

All functions are pure: they read the events they are given and build new
summary objects on every call. Records without a parseable timestamp are
skipped (and logged) by every aggregation.
"""
from collections import defaultdict
from datetime import datetime
from typing import Dict, Iterable, List, Tuple

from ..domain.entities import CollisionEvent, DetectedObject
from ..domain.defaults import (
    ACCIDENT_SEVERITIES,
    resolve_confidence,
    resolve_object_type,
    resolve_objects,
    resolve_severity,
)
from ..domain.statistics import (
    AccidentStats,
    ConfidenceCounts,
    ObjectDetectionStats,
    OverviewStats,
    SeverityCounts,
    TimeOfDayCounts,
)
from .time_window import iter_timestamped

HIGH_CONFIDENCE = 0.85
MEDIUM_CONFIDENCE = 0.6

def time_of_day_bucket(hour: int) -> str:
    if 6 <= hour < 12:
        return "morning"
    if 12 <= hour < 18:
        return "afternoon"
    if 18 <= hour < 22:
        return "evening"
    return "night"

def confidence_tier(confidence: float) -> str:
    # Compared only: values above 1 land in high, negatives in low.
    if confidence >= HIGH_CONFIDENCE:
        return "high"
    if confidence >= MEDIUM_CONFIDENCE:
        return "medium"
    return "low"

def _count_time_of_day(pairs: List[Tuple[CollisionEvent, datetime]]) -> TimeOfDayCounts:
    counts = defaultdict(int)
    for _, timestamp in pairs:
        counts[time_of_day_bucket(timestamp.hour)] += 1
    return TimeOfDayCounts(**counts)

def _count_severity(pairs: List[Tuple[CollisionEvent, datetime]]) -> SeverityCounts:
    counts = defaultdict(int)
    for event, _ in pairs:
        severity = resolve_severity(event)
        if severity is not None:
            counts[severity] += 1
    return SeverityCounts(**counts)

def _flatten_objects(pairs: List[Tuple[CollisionEvent, datetime]]) -> List[DetectedObject]:
    objects = []
    for event, _ in pairs:
        objects.extend(resolve_objects(event))
    return objects

def count_object_types(objects: Iterable[DetectedObject]) -> Dict[str, int]:
    counts = defaultdict(int)
    for obj in objects:
        counts[resolve_object_type(obj)] += 1
    return dict(counts)

def aggregate_overview(events: Iterable[CollisionEvent]) -> OverviewStats:
    """
    Totals by severity and by local time of day.

    Unrecognised or missing severities count toward ``total`` but toward
    none of the severity buckets.
    """
    pairs = list(iter_timestamped(events))
    return OverviewStats(
        total=len(pairs),
        by_severity=_count_severity(pairs),
        by_time_of_day=_count_time_of_day(pairs),
    )

def aggregate_accidents(events: Iterable[CollisionEvent]) -> AccidentStats:
    """
    Critical and high severity events, re-bucketed by time of day from that
    subset alone.
    """
    accidents = [
        (event, timestamp)
        for event, timestamp in iter_timestamped(events)
        if resolve_severity(event) in ACCIDENT_SEVERITIES
    ]
    severity = _count_severity(accidents)
    return AccidentStats(
        total_accidents=len(accidents),
        critical=severity.critical,
        high=severity.high,
        by_time_of_day=_count_time_of_day(accidents),
    )

def aggregate_objects(events: Iterable[CollisionEvent]) -> ObjectDetectionStats:
    """
    Detected objects of all events, counted by type and by confidence tier.
    Both breakdowns sum to ``total_objects``.
    """
    objects = _flatten_objects(list(iter_timestamped(events)))

    by_confidence = defaultdict(int)
    for obj in objects:
        by_confidence[confidence_tier(resolve_confidence(obj))] += 1

    return ObjectDetectionStats(
        total_objects=len(objects),
        by_type=count_object_types(objects),
        by_confidence=ConfidenceCounts(**by_confidence),
    )

def aggregate_object_types(events: Iterable[CollisionEvent]) -> Dict[str, int]:
    return count_object_types(_flatten_objects(list(iter_timestamped(events))))

def percentage(count: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return count / total * 100

def format_percentage(count: int, total: int) -> float:
    """Percentage rounded to one decimal place, for display."""
    return round(percentage(count, total), 1)
