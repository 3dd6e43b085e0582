# portfolio/auth/store.py
from typing import Any, Dict, Optional, Protocol

from flask import session as flask_session


class KeyValueStore(Protocol):
    """Local cache the session controller mirrors the signed-in session into."""

    def get(self, key: str) -> Optional[Any]: ...

    def set(self, key: str, value: Any) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return self.data.get(key)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class FlaskSessionStore:
    """Store backed by Flask's signed session cookie. Values must be JSON-able."""

    def get(self, key: str) -> Optional[Any]:
        return flask_session.get(key)

    def set(self, key: str, value: Any) -> None:
        flask_session[key] = value

    def remove(self, key: str) -> None:
        flask_session.pop(key, None)
