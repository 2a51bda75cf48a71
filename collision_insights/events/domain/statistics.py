"""
Summary shapes produced by the statistics engine.

Field names serialize in camelCase (``bySeverity``, ``totalObjects``), which
is the interface dashboard panels read.
"""
import datetime
from typing import Dict, List

from pydantic import Field

from .entities import CamelModel

class SeverityCounts(CamelModel):
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0

class TimeOfDayCounts(CamelModel):
    morning: int = 0    # 06:00 - 12:00
    afternoon: int = 0  # 12:00 - 18:00
    evening: int = 0    # 18:00 - 22:00
    night: int = 0      # 22:00 - 06:00

    def total(self) -> int:
        return self.morning + self.afternoon + self.evening + self.night

class ConfidenceCounts(CamelModel):
    high: int = 0    # >= 0.85
    medium: int = 0  # 0.60 - 0.85
    low: int = 0     # < 0.60

class OverviewStats(CamelModel):
    total: int = 0
    by_severity: SeverityCounts = Field(default_factory=SeverityCounts)
    by_time_of_day: TimeOfDayCounts = Field(default_factory=TimeOfDayCounts)

class AccidentStats(CamelModel):
    """
    Critical and high severity events only. ``medium`` and ``low`` stay zero
    and exist so panels can render it like the overview.
    """
    total_accidents: int = 0
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    by_time_of_day: TimeOfDayCounts = Field(default_factory=TimeOfDayCounts)

class ObjectDetectionStats(CamelModel):
    total_objects: int = 0
    by_type: Dict[str, int] = Field(default_factory=dict)
    by_confidence: ConfidenceCounts = Field(default_factory=ConfidenceCounts)

class TrendPoint(CamelModel):
    date: datetime.date
    count: int = 0

class EventStatistics(OverviewStats):
    """Overview plus object types and the daily trend of the same window."""
    object_types: Dict[str, int] = Field(default_factory=dict)
    recent_trend: List[TrendPoint] = Field(default_factory=list)
