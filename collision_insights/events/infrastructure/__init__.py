"""
Infrastructure module initialization.
"""
from .stores import InMemoryStore, JsonFileStore
from .kv_repository import KeyValueEventRepository, EVENTS_KEY
from .sql_repository import SQLEventRepository
from .sample_data import generate_events

__all__ = [
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueEventRepository",
    "EVENTS_KEY",
    "SQLEventRepository",
    "generate_events"
]
