from flask import jsonify

from portfolio.application.settings import get_settings, update_settings
from portfolio.gateway import get_gateway
from portfolio.utils.decorators import session_required
from . import dashboard_bp, json_body


@dashboard_bp.route("/settings", methods=["GET"])
@session_required
def read_settings():
    return jsonify(get_settings(gateway=get_gateway())), 200


@dashboard_bp.route("/settings", methods=["PUT"])
@session_required
def write_settings():
    settings = update_settings(gateway=get_gateway(), data=json_body())
    return jsonify(settings), 200
