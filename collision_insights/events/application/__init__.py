"""
Application layer: filtering, aggregation and the statistics service.
"""
from .time_window import RANGE_TOKENS, compute_cutoff, filter_by_range
from .aggregators import (
    aggregate_overview,
    aggregate_accidents,
    aggregate_objects,
    aggregate_object_types,
    percentage,
    format_percentage,
    time_of_day_bucket,
    confidence_tier
)
from .trend import generate_trend
from .services import EventStatisticsService
