# portfolio/gateway/base.py
"""
Narrow contract for the backend service the site runs against.

Everything above this module (application services, the session
controller, the blueprints) talks to tables, storage, auth and callable
functions only through these interfaces and receives plain ``dict`` rows.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence


# -------------------------------------------------
# Errors
# -------------------------------------------------
class GatewayError(Exception):
    """Any failure reported by the gateway."""


class GatewayUnavailable(GatewayError):
    """The gateway could not be reached."""


class ConstraintViolation(GatewayError):
    """A write was rejected by a table constraint (e.g. a unique slug)."""


class RecordNotFound(GatewayError):
    """The addressed row does not exist."""


class AuthError(GatewayError):
    """Credentials or tokens were rejected by the auth service."""


# -------------------------------------------------
# Auth payloads
# -------------------------------------------------
SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"


@dataclass(frozen=True)
class Identity:
    id: str
    email: str
    role: str = "owner"

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "email": self.email, "role": self.role}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Identity":
        return cls(id=data["id"], email=data["email"], role=data.get("role", "owner"))


@dataclass(frozen=True)
class Session:
    access_token: str
    user: Identity
    expires_at: Optional[datetime] = None
    refresh_token: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
            "user": self.user.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        expires_at = data.get("expires_at")
        return cls(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token"),
            expires_at=datetime.fromisoformat(expires_at) if expires_at else None,
            user=Identity.from_dict(data["user"]),
        )


AuthCallback = Callable[[str, Optional[Session]], None]


@dataclass
class Subscription:
    """Handle returned by ``on_auth_change``; ``unsubscribe`` is idempotent."""

    _listeners: List[AuthCallback]
    callback: AuthCallback
    active: bool = field(default=True)

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        if self.callback in self._listeners:
            self._listeners.remove(self.callback)


# -------------------------------------------------
# Interfaces
# -------------------------------------------------
class AuthGateway(ABC):
    @abstractmethod
    def sign_in(self, email: str, password: str) -> Session: ...

    @abstractmethod
    def sign_up(self, email: str, password: str) -> Session: ...

    @abstractmethod
    def sign_out(self) -> None: ...

    @abstractmethod
    def get_session(self) -> Optional[Session]: ...

    @abstractmethod
    def get_user(self, access_token: str) -> Optional[Identity]: ...

    @abstractmethod
    def on_auth_change(self, callback: AuthCallback) -> Subscription: ...


class Gateway(ABC):
    auth: AuthGateway

    @abstractmethod
    def get(self, table: str, **match: Any) -> Optional[Dict[str, Any]]: ...

    @abstractmethod
    def list(
        self,
        table: str,
        *,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> List[Dict[str, Any]]: ...

    @abstractmethod
    def count(self, table: str, *, filters: Optional[Dict[str, Any]] = None) -> int: ...

    @abstractmethod
    def create(self, table: str, values: Dict[str, Any]) -> Dict[str, Any]: ...

    @abstractmethod
    def update(self, table: str, record_id: str, values: Dict[str, Any]) -> Dict[str, Any]: ...

    @abstractmethod
    def delete(self, table: str, record_id: str) -> None: ...

    @abstractmethod
    def upload(self, file: Any, path: str) -> str: ...

    @abstractmethod
    def invoke(self, function_name: str, body: Dict[str, Any]) -> Dict[str, Any]: ...
