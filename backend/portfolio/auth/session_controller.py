# portfolio/auth/session_controller.py
"""
Keeps track of who is signed in.

The controller owns three pieces of state (user, session, loading) and a
local cache of the session kept in a ``KeyValueStore``. The cache only
bridges gaps where the gateway cannot report a session itself; the gateway
stays authoritative whenever it answers.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from portfolio.gateway.base import (
    SIGNED_OUT,
    AuthGateway,
    GatewayError,
    Identity,
    Session,
    Subscription,
)
from .store import KeyValueStore

logger = logging.getLogger(__name__)

SIGN_IN_PATH = "/auth"
CACHE_USER_KEY = "current_user"
CACHE_SESSION_KEY = "current_session"

AUTHENTICATED = "authenticated"
ANONYMOUS = "anonymous"
LOADING = "loading"

Notify = Callable[[str, str], None]


def _no_notify(title: str, description: str) -> None:
    pass


@dataclass(frozen=True)
class AuthState:
    user: Optional[Identity] = None
    session: Optional[Session] = None
    loading: bool = False

    @property
    def status(self) -> str:
        if self.loading:
            return LOADING
        if self.user is not None and self.session is not None:
            return AUTHENTICATED
        return ANONYMOUS

    @property
    def is_authenticated(self) -> bool:
        return self.status == AUTHENTICATED


class SessionController:
    def __init__(
        self,
        auth: AuthGateway,
        store: KeyValueStore,
        *,
        navigate: Callable[[str], None],
        current_path: Callable[[], str],
        notify: Optional[Notify] = None,
    ):
        self.auth = auth
        self.store = store
        self.navigate = navigate
        self.current_path = current_path
        self.notify = notify or _no_notify

        self.state = AuthState()
        self._subscription: Optional[Subscription] = None

    # -------------------------------------------------
    # Lifecycle
    # -------------------------------------------------
    def __enter__(self) -> "SessionController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def dispose(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def initialize(self) -> AuthState:
        """
        Resolve the signed-in state at start-up.

        Subscribes to auth changes before querying the gateway so an event
        fired in between is not lost.
        """
        self.state = AuthState(loading=True)

        if self._subscription is None:
            self._subscription = self.auth.on_auth_change(self.on_auth_event)

        try:
            session = self.auth.get_session()
        except GatewayError as exc:
            logger.error("Auth check error: %s", exc)
            self.notify("Authentication error", str(exc))
            session = None

        if session is not None:
            self._adopt(session)
            return self.state

        return self._restore_from_cache()

    # -------------------------------------------------
    # Events & operations
    # -------------------------------------------------
    def on_auth_event(self, event: str, session: Optional[Session]) -> None:
        logger.debug("Auth state changed: %s", event)

        if event == SIGNED_OUT:
            self._clear()
            self._redirect_to_sign_in()
        elif session is not None:
            self._adopt(session)

    def refresh(self) -> bool:
        """Re-query the gateway. Failures leave the current state as it is."""
        try:
            session = self.auth.get_session()
        except GatewayError as exc:
            logger.warning("Session refresh failed, keeping current state: %s", exc)
            return False

        if session is None:
            return False

        self._adopt(session)
        return True

    def sign_out(self) -> None:
        # Local state goes first; the remote call may fail or hang
        self._clear()

        try:
            self.auth.sign_out()
        except GatewayError as exc:
            logger.warning("Remote sign-out failed: %s", exc)

        self.notify("Signed out successfully", "You have been logged out of your account.")
        self.navigate(SIGN_IN_PATH)

    # -------------------------------------------------
    # Internals
    # -------------------------------------------------
    def _adopt(self, session: Session) -> None:
        self.store.set(CACHE_USER_KEY, session.user.to_dict())
        self.store.set(CACHE_SESSION_KEY, session.to_dict())
        self.state = AuthState(user=session.user, session=session)

    def _clear(self) -> None:
        self.store.remove(CACHE_USER_KEY)
        self.store.remove(CACHE_SESSION_KEY)
        self.state = AuthState()

    def _cached_session(self) -> Optional[Session]:
        cached_user = self.store.get(CACHE_USER_KEY)
        cached_session = self.store.get(CACHE_SESSION_KEY)
        if not cached_user or not cached_session:
            return None

        try:
            session = Session.from_dict(cached_session)
        except (AttributeError, KeyError, TypeError, ValueError):
            logger.warning("Discarding unreadable cached session")
            return None

        if not isinstance(cached_user, dict) or session.user.id != cached_user.get("id"):
            return None
        return session

    def _restore_from_cache(self) -> AuthState:
        cached = self._cached_session()
        if cached is None:
            self._clear()
            self._redirect_to_sign_in()
            return self.state

        # Optimistic: trust the cache, then check it with the gateway
        self.state = AuthState(user=cached.user, session=cached)
        self._revalidate(cached)
        return self.state

    def _revalidate(self, cached: Session) -> None:
        try:
            identity = self.auth.get_user(cached.access_token)
        except GatewayError as exc:
            logger.warning("Could not revalidate cached session, keeping it: %s", exc)
            return

        if identity is None:
            logger.info("Cached session rejected by the gateway")
            self._clear()
            self._redirect_to_sign_in()
            return

        if identity != cached.user:
            self._adopt(
                Session(
                    access_token=cached.access_token,
                    refresh_token=cached.refresh_token,
                    expires_at=cached.expires_at,
                    user=identity,
                )
            )

    def _redirect_to_sign_in(self) -> None:
        if self.current_path() != SIGN_IN_PATH:
            self.navigate(SIGN_IN_PATH)
