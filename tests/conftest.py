import pytest
from datetime import datetime
from collision_insights.events.domain import CollisionEvent
from collision_insights.events.infrastructure import InMemoryStore, KeyValueEventRepository, EVENTS_KEY
from collision_insights.events.application import EventStatisticsService

NOW = datetime(2024, 3, 10, 12, 0, 0)

@pytest.fixture
def now():
    return NOW

@pytest.fixture
def make_event():
    def _make(event_id="1", timestamp="2024-03-10T08:00:00", severity=None, objects=None, **extra):
        data = {"id": event_id, "timestamp": timestamp, "severity": severity, "objects": objects or []}
        data.update(extra)
        return CollisionEvent.model_validate(data)
    return _make

@pytest.fixture
def sample_records():
    """
    Six stored records relative to NOW (2024-03-10 12:00):
    today, yesterday, five days ago, last month, last December and one
    without a usable timestamp.
    """
    return [
        {
            "id": "1", "timestamp": "2024-03-10T08:15:00", "severity": "critical",
            "location": {"address": "Jinja Road", "roadType": "highway"},
            "objects": [
                {"id": "o1", "type": "vehicle", "subType": "car", "confidence": 0.92},
                {"id": "o2", "type": "pedestrian", "confidence": 0.71},
            ],
            "distances": [{"objectId1": "o1", "objectId2": "o2", "distance": 1.8, "status": "critical"}],
        },
        {
            "id": "2", "timestamp": "2024-03-09T14:00:00", "severity": "high",
            "objects": [{"id": "o3", "type": "vehicle", "confidence": 0.5}],
        },
        {
            "id": "3", "timestamp": "2024-03-05T19:30:00", "severity": "medium",
            "objects": [
                {"id": "o4", "type": "animal", "subType": "cattle", "confidence": 0.86},
                {"id": "o5"},
            ],
        },
        {"id": "4", "timestamp": "2024-02-20T23:10:00", "severity": "low", "objects": []},
        {
            "id": "5", "timestamp": "2023-12-01T03:00:00", "severity": "catastrophic",
            "objects": [{"id": "o6", "type": "vehicle", "confidence": 0.6}],
        },
        {
            "id": "6", "timestamp": "not-a-date", "severity": "critical",
            "objects": [{"id": "o7", "type": "vehicle", "confidence": 0.99}],
        },
    ]

@pytest.fixture
def sample_events(sample_records):
    return [CollisionEvent.model_validate(record) for record in sample_records]

@pytest.fixture
def memory_repository(sample_records):
    store = InMemoryStore({EVENTS_KEY: sample_records})
    return KeyValueEventRepository(store, clock=lambda: NOW)

@pytest.fixture
def service(memory_repository):
    return EventStatisticsService(memory_repository, clock=lambda: NOW)
