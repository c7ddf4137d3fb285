from __future__ import annotations

from typing import Any, MutableMapping, Optional, Protocol

from ..core.constants import CURRENT_USER_KEY
from ..database.store import KeyValueStore
from .model import SessionUser


class SessionStore(Protocol):
    """Holds the "current user" for one execution context.

    Passed explicitly into AuthService calls; services never keep session state.
    """

    def get(self) -> Optional[SessionUser]:
        raise NotImplementedError

    def set(self, user: SessionUser) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class KVSessionStore(SessionStore):
    """Session persisted under one key of the key-value store (scripts, single user)."""

    def __init__(self, store: KeyValueStore, *, key: str = CURRENT_USER_KEY):
        self._store = store
        self._key = key

    def get(self) -> Optional[SessionUser]:
        raw = self._store.get(self._key)
        return SessionUser.from_dict(raw) if raw else None

    def set(self, user: SessionUser) -> None:
        self._store.set(self._key, user.to_dict())

    def clear(self) -> None:
        self._store.remove(self._key)


class MappingSessionStore(SessionStore):
    """Session kept in a dict-like container, e.g. ``flask.session``."""

    def __init__(self, container: MutableMapping[str, Any], *, key: str = "current_user"):
        self._container = container
        self._key = key

    def get(self) -> Optional[SessionUser]:
        raw = self._container.get(self._key)
        return SessionUser.from_dict(raw) if raw else None

    def set(self, user: SessionUser) -> None:
        self._container[self._key] = user.to_dict()

    def clear(self) -> None:
        self._container.pop(self._key, None)
