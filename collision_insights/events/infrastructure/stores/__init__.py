from .memory import InMemoryStore
from .json_file import JsonFileStore

__all__ = ["InMemoryStore", "JsonFileStore"]
