from functools import wraps
from flask import current_app, g, redirect

from portfolio.auth import SIGN_IN_PATH, get_session_controller


def session_required(fn):
    """
    Gate a view behind a signed-in session.

    Anonymous requests are redirected to the sign-in page (or wherever the
    session controller asked to navigate).
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        controller = get_session_controller()

        if not controller.state.is_authenticated:
            target = g.get("redirect_to") or SIGN_IN_PATH
            current_app.logger.info("Anonymous dashboard request, redirecting to %s", target)
            return redirect(target)

        g.current_user = controller.state.user
        return fn(*args, **kwargs)
    return wrapper


def page_view(fn):
    """Mark a public page route so the tracking middleware records its views."""
    fn.tracks_page_view = True
    return fn
