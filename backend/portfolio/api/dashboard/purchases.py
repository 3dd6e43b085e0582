from flask import jsonify

from portfolio.application import purchases as purchase_service
from portfolio.gateway import get_gateway
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.normalizers.service import normalize_purchase
from portfolio.utils.decorators import session_required
from . import dashboard_bp, json_body


@dashboard_bp.route("/purchases", methods=["GET"])
@session_required
def list_purchases():
    purchases = purchase_service.list_purchases(gateway=get_gateway())
    return jsonify(normalize_pagination(purchases, normalize_purchase)), 200


@dashboard_bp.route("/purchases/<purchase_id>", methods=["PUT"])
@session_required
def update_purchase(purchase_id):
    purchase = purchase_service.update_purchase_status(
        gateway=get_gateway(),
        purchase_id=purchase_id,
        status=json_body().get("status"),
    )
    return jsonify(normalize_purchase(purchase)), 200


@dashboard_bp.route("/purchases/<purchase_id>", methods=["DELETE"])
@session_required
def delete_purchase(purchase_id):
    purchase_service.delete_purchase(gateway=get_gateway(), purchase_id=purchase_id)
    return jsonify({"message": "Purchase deleted successfully"}), 200
