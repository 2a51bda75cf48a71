"""
Statistics facade used by the API.

Every call reads one snapshot from the repository and aggregates it. The
service holds no state between calls besides its collaborators.
"""
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union

from ...domain.entities import CollisionEvent
from ...domain.repositories import EventRepository
from ...domain.statistics import (
    AccidentStats,
    EventStatistics,
    ObjectDetectionStats,
    TrendPoint,
)
from ..aggregators import (
    aggregate_accidents,
    aggregate_object_types,
    aggregate_objects,
    aggregate_overview,
)
from ..time_window import filter_by_range
from ..trend import DEFAULT_TREND_DAYS, generate_trend
from ....common.logging import log_execution_time, setup_logger

logger = setup_logger(__name__)

class EventStatisticsService:
    def __init__(
        self,
        repository: EventRepository,
        clock: Callable[[], datetime] = datetime.now,
        trend_days: int = DEFAULT_TREND_DAYS,
        default_range: str = "month",
        latest_events_range: str = "day",
    ):
        self.repository = repository
        self.clock = clock
        self.trend_days = trend_days
        self.default_range = default_range
        self.latest_events_range = latest_events_range

    def _events_in_range(self, time_range: Optional[str], now: datetime) -> List[CollisionEvent]:
        return filter_by_range(self.repository.get_all(), time_range or self.default_range, now)

    @log_execution_time(logger)
    def get_latest_events(self, time_range: Optional[str] = None) -> List[CollisionEvent]:
        """Events of the window, most recent first."""
        return self._events_in_range(time_range or self.latest_events_range, self.clock())

    def get_event_by_id(self, event_id: str) -> CollisionEvent:
        return self.repository.get(event_id)

    @log_execution_time(logger)
    def get_event_statistics(self, time_range: Optional[str] = None) -> EventStatistics:
        """
        Overview of the window plus its object types and the daily trend
        ending today.
        """
        now = self.clock()
        events = self._events_in_range(time_range, now)
        overview = aggregate_overview(events)
        return EventStatistics(
            total=overview.total,
            by_severity=overview.by_severity,
            by_time_of_day=overview.by_time_of_day,
            object_types=aggregate_object_types(events),
            recent_trend=generate_trend(events, days=self.trend_days, today=now),
        )

    @log_execution_time(logger)
    def get_object_detection_stats(self, time_range: Optional[str] = None) -> ObjectDetectionStats:
        return aggregate_objects(self._events_in_range(time_range, self.clock()))

    @log_execution_time(logger)
    def get_accident_stats(self, time_range: Optional[str] = None) -> AccidentStats:
        return aggregate_accidents(self._events_in_range(time_range, self.clock()))

    @log_execution_time(logger)
    def get_trend(self, days: Optional[int] = None) -> List[TrendPoint]:
        """Daily counts over every stored event, ending today."""
        return generate_trend(
            self.repository.get_all(),
            days=days if days is not None else self.trend_days,
            today=self.clock(),
        )

    def add_event(self, data: Union[CollisionEvent, Dict[str, Any]]) -> CollisionEvent:
        """
        Validates and stores a new event. Missing id and timestamp are
        assigned by the repository.
        """
        event = data if isinstance(data, CollisionEvent) else CollisionEvent.model_validate(data)
        created = self.repository.append(event)
        logger.info(f"Added event {created.id} (severity={created.severity})")
        return created
