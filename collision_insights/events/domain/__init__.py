"""
Domain module initialization.
"""
from .entities import CollisionEvent, DetectedObject, ObjectDistance, Location
from .statistics import (
    SeverityCounts,
    TimeOfDayCounts,
    ConfidenceCounts,
    OverviewStats,
    AccidentStats,
    ObjectDetectionStats,
    TrendPoint,
    EventStatistics
)
from .repositories import EventRepository, KeyValueStore
