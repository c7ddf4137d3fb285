from __future__ import annotations

from typing import Any, Optional, Protocol


class KeyValueStore(Protocol):
    """Durable string-keyed store of JSON-compatible values.

    Repositories read a whole collection with ``get`` and write it back with
    ``set``; there is no partial update.
    """

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def set_if_absent(self, key: str, value: Any) -> bool:
        """Write only when ``key`` has never been set. Returns True if written."""

        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError
