from __future__ import annotations

import copy
from typing import Any, Optional


class InMemoryKeyValueStore:
    """Process-local store used by tests and the ``memory`` backend.

    Values are deep-copied in and out so callers never share state with the
    store, same as a serializing backend.
    """

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._data: dict[str, Any] = copy.deepcopy(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def set_if_absent(self, key: str, value: Any) -> bool:
        if key in self._data:
            return False
        self.set(key, value)
        return True

    def remove(self, key: str) -> None:
        self._data.pop(key, None)
