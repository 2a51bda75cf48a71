from .event_statistics import EventStatisticsService

__all__ = ["EventStatisticsService"]
