import copy
from typing import Any, Dict, Optional

class InMemoryStore:
    """
    Dict-backed key-value store. Values are deep-copied in and out so callers
    never share mutable state with the store.
    """
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)
