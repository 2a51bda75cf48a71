import pytest
from collision_insights.events.application.aggregators import (
    aggregate_overview, aggregate_accidents, time_of_day_bucket
)

@pytest.mark.parametrize("hour, bucket", [
    (0, "night"), (5, "night"), (6, "morning"), (11, "morning"),
    (12, "afternoon"), (17, "afternoon"), (18, "evening"), (21, "evening"),
    (22, "night"), (23, "night"),
])
def test_time_of_day_bucket_boundaries(hour, bucket):
    assert time_of_day_bucket(hour) == bucket

def test_empty_overview():
    assert aggregate_overview([]).model_dump(by_alias=True) == {
        "total": 0,
        "bySeverity": {"critical": 0, "high": 0, "medium": 0, "low": 0},
        "byTimeOfDay": {"morning": 0, "afternoon": 0, "evening": 0, "night": 0},
    }

def test_single_critical_afternoon_event(make_event):
    stats = aggregate_overview([make_event("1", "2024-03-10T14:20:00", severity="critical")])
    assert stats.total == 1
    assert stats.by_severity.model_dump() == {"critical": 1, "high": 0, "medium": 0, "low": 0}
    assert stats.by_time_of_day.model_dump() == {"morning": 0, "afternoon": 1, "evening": 0, "night": 0}

def test_overview_of_sample(sample_events):
    stats = aggregate_overview(sample_events)
    # Record "6" has no usable timestamp and is left out entirely
    assert stats.total == 5
    assert stats.by_severity.model_dump() == {"critical": 1, "high": 1, "medium": 1, "low": 1}
    assert stats.by_time_of_day.model_dump() == {"morning": 1, "afternoon": 1, "evening": 1, "night": 2}

def test_time_of_day_sum_matches_timestamped_events(sample_events):
    stats = aggregate_overview(sample_events)
    parseable = [e for e in sample_events if e.timestamp is not None]
    assert stats.by_time_of_day.total() == len(parseable) == stats.total

def test_unrecognised_severity_counts_toward_total_only(make_event):
    events = [
        make_event("1", severity="Critical"),
        make_event("2", severity=None),
        make_event("3", severity="severe"),
    ]
    stats = aggregate_overview(events)
    assert stats.total == 3
    assert stats.by_severity.model_dump() == {"critical": 0, "high": 0, "medium": 0, "low": 0}

def test_accidents_recompute_time_of_day_from_subset(make_event):
    events = [
        make_event("1", "2024-03-10T08:00:00", severity="critical"),
        make_event("2", "2024-03-10T20:00:00", severity="high"),
        make_event("3", "2024-03-10T14:00:00", severity="medium"),
        make_event("4", "2024-03-10T23:00:00", severity="low"),
    ]
    stats = aggregate_accidents(events)
    assert stats.total_accidents == 2
    assert (stats.critical, stats.high, stats.medium, stats.low) == (1, 1, 0, 0)
    assert stats.by_time_of_day.model_dump() == {"morning": 1, "afternoon": 0, "evening": 1, "night": 0}

def test_empty_accidents():
    assert aggregate_accidents([]).model_dump(by_alias=True) == {
        "totalAccidents": 0, "critical": 0, "high": 0, "medium": 0, "low": 0,
        "byTimeOfDay": {"morning": 0, "afternoon": 0, "evening": 0, "night": 0},
    }

def test_aggregation_is_idempotent(sample_events):
    assert aggregate_overview(sample_events) == aggregate_overview(sample_events)
    assert aggregate_accidents(sample_events) == aggregate_accidents(sample_events)
