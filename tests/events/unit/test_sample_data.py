from datetime import timedelta
from collision_insights.events.domain import CollisionEvent
from collision_insights.events.domain.defaults import SEVERITIES, DISTANCE_STATUSES
from collision_insights.events.infrastructure.sample_data import generate_events

def test_generated_events_are_valid_and_recent(now):
    records = generate_events(50, days=10, now=now, seed=7)
    assert len(records) == 50
    for record in records:
        event = CollisionEvent.model_validate(record)
        assert now - timedelta(days=10) <= event.timestamp <= now
        assert event.severity in SEVERITIES
        assert event.objects
        object_ids = {obj.id for obj in event.objects}
        for distance in event.distances:
            assert {distance.object_id1, distance.object_id2} <= object_ids
            assert distance.status in DISTANCE_STATUSES

def test_generation_is_reproducible_with_seed(now):
    assert generate_events(20, now=now, seed=3) == generate_events(20, now=now, seed=3)

def test_generated_events_are_oldest_first(now):
    records = generate_events(30, now=now, seed=1)
    timestamps = [r["timestamp"] for r in records]
    assert timestamps == sorted(timestamps)
