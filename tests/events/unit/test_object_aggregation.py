import pytest
from collision_insights.events.application.aggregators import (
    aggregate_objects, confidence_tier, percentage, format_percentage
)

def test_two_objects_high_and_low(make_event):
    event = make_event(objects=[
        {"id": "a", "type": "vehicle", "confidence": 0.9},
        {"id": "b", "type": "pedestrian", "confidence": 0.5},
    ])
    stats = aggregate_objects([event])
    assert stats.total_objects == 2
    assert stats.by_confidence.model_dump() == {"high": 1, "medium": 0, "low": 1}

@pytest.mark.parametrize("confidence, tier", [
    (0.85, "high"), (1.0, "high"), (1.7, "high"),
    (0.8499, "medium"), (0.6, "medium"),
    (0.5999, "low"), (0.0, "low"), (-0.3, "low"),
])
def test_confidence_tiers(confidence, tier):
    assert confidence_tier(confidence) == tier

def test_missing_type_and_confidence_use_defaults(make_event):
    event = make_event(objects=[{"id": "x"}, {"id": "y", "type": ""}, {"id": "z", "type": "animal"}])
    stats = aggregate_objects([event])
    assert stats.by_type == {"unknown": 2, "animal": 1}
    assert stats.by_confidence.low == 3

def test_events_without_objects(make_event):
    stats = aggregate_objects([make_event("1", objects=None), make_event("2")])
    assert stats.total_objects == 0
    assert stats.by_type == {}

def test_sample_breakdowns_are_consistent(sample_events):
    stats = aggregate_objects(sample_events)
    # o7 belongs to the record without a timestamp
    assert stats.total_objects == 6
    assert stats.by_type == {"vehicle": 3, "pedestrian": 1, "animal": 1, "unknown": 1}
    assert stats.by_confidence.model_dump() == {"high": 2, "medium": 2, "low": 2}
    assert sum(stats.by_type.values()) == stats.total_objects
    assert sum(stats.by_confidence.model_dump().values()) == stats.total_objects

def test_empty_objects_shape():
    assert aggregate_objects([]).model_dump(by_alias=True) == {
        "totalObjects": 0, "byType": {}, "byConfidence": {"high": 0, "medium": 0, "low": 0},
    }

def test_percentage():
    assert percentage(1, 4) == 25.0
    assert percentage(3, 0) == 0
    assert format_percentage(1, 3) == 33.3
    assert format_percentage(2, 3) == 66.7
