from flask import flash, g, request

from portfolio.gateway import get_gateway
from .session_controller import (
    ANONYMOUS,
    AUTHENTICATED,
    CACHE_SESSION_KEY,
    CACHE_USER_KEY,
    LOADING,
    SIGN_IN_PATH,
    AuthState,
    SessionController,
)
from .store import FlaskSessionStore, KeyValueStore, MemoryStore


def _navigate(path: str) -> None:
    g.redirect_to = path


def _notify(title: str, description: str) -> None:
    flash(f"{title}: {description}" if description else title, "auth")


def get_session_controller() -> SessionController:
    """
    Request-scoped session controller.

    The signed Flask session cookie plays the part of the local cache;
    redirects requested by the controller are left on ``g.redirect_to``.
    """
    if "session_controller" not in g:
        controller = SessionController(
            get_gateway().auth,
            FlaskSessionStore(),
            navigate=_navigate,
            current_path=lambda: request.path,
            notify=_notify,
        )
        controller.initialize()
        g.session_controller = controller
        g.current_user = controller.state.user
    return g.session_controller


def init_session(app) -> None:
    @app.teardown_request
    def dispose_session_controller(exc):
        g.pop("current_user", None)
        g.pop("redirect_to", None)
        controller = g.pop("session_controller", None)
        if controller is not None:
            controller.dispose()


__all__ = [
    "ANONYMOUS",
    "AUTHENTICATED",
    "CACHE_SESSION_KEY",
    "CACHE_USER_KEY",
    "LOADING",
    "SIGN_IN_PATH",
    "AuthState",
    "FlaskSessionStore",
    "KeyValueStore",
    "MemoryStore",
    "SessionController",
    "get_session_controller",
    "init_session",
]
