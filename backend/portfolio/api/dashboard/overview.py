from flask import jsonify

from portfolio.application.overview import dashboard_overview
from portfolio.gateway import get_gateway
from portfolio.normalizers.message import normalize_message
from portfolio.utils.decorators import session_required
from . import dashboard_bp


@dashboard_bp.route("", methods=["GET"])
@session_required
def overview():
    data = dashboard_overview(gateway=get_gateway())
    data["recent_messages"] = [normalize_message(m) for m in data["recent_messages"]]
    return jsonify(data), 200
