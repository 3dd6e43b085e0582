# portfolio/api/dashboard/messages.py
from flask import jsonify, request

from portfolio.application import contact as contact_service
from portfolio.domain.invariants.fields import as_bool
from portfolio.gateway import get_gateway
from portfolio.normalizers.message import normalize_message
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.utils.decorators import session_required
from . import dashboard_bp, json_body


def _flag(name):
    return request.args.get(name, "").lower() == "true"


@dashboard_bp.route("/messages", methods=["GET"])
@session_required
def list_messages():
    messages = contact_service.list_messages(
        gateway=get_gateway(),
        unread_only=_flag("unread"),
        archived_only=_flag("archived"),
        limit=request.args.get("limit", type=int),
        offset=request.args.get("offset", type=int),
    )
    return jsonify(normalize_pagination(messages, normalize_message)), 200


@dashboard_bp.route("/messages/<message_id>", methods=["GET"])
@session_required
def get_message(message_id):
    message = contact_service.get_message(gateway=get_gateway(), message_id=message_id)
    return jsonify(normalize_message(message)), 200


@dashboard_bp.route("/messages/<message_id>", methods=["PUT"])
@session_required
def update_message(message_id):
    """Accepts ``{"is_read": true}`` and/or ``{"is_archived": true}``."""
    data = json_body()
    gateway = get_gateway()

    message = contact_service.get_message(gateway=gateway, message_id=message_id)
    if as_bool(data.get("is_read"), "is_read"):
        message = contact_service.mark_message_read(gateway=gateway, message_id=message_id)
    if as_bool(data.get("is_archived"), "is_archived"):
        message = contact_service.archive_message(gateway=gateway, message_id=message_id)

    return jsonify(normalize_message(message)), 200


@dashboard_bp.route("/messages/<message_id>", methods=["DELETE"])
@session_required
def delete_message(message_id):
    contact_service.delete_message(gateway=get_gateway(), message_id=message_id)
    return jsonify({"message": "Message deleted successfully"}), 200
