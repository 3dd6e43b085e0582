from flask import Blueprint, request

from portfolio.domain.invariants.exceptions import InvariantViolation

# Owner dashboard; every route is gated by session_required
dashboard_bp = Blueprint("dashboard", __name__)


def json_body():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise InvariantViolation("Expected a JSON object.")
    return data


# Import route modules so they register with dashboard_bp
from . import overview
from . import projects
from . import blog
from . import services
from . import purchases
from . import messages
from . import donations
from . import analytics
from . import settings
from . import uploads
from . import content
