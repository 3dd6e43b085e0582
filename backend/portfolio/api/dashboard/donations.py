from flask import jsonify, request

from portfolio.application import donations as donation_service
from portfolio.gateway import get_gateway
from portfolio.normalizers.donation import normalize_donation
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.utils.decorators import session_required
from . import dashboard_bp, json_body


@dashboard_bp.route("/donations", methods=["GET"])
@session_required
def list_donations():
    donations = donation_service.list_donations(
        gateway=get_gateway(),
        status=request.args.get("status") or None,
        limit=request.args.get("limit", type=int),
        offset=request.args.get("offset", type=int),
    )
    return jsonify(normalize_pagination(donations, normalize_donation)), 200


@dashboard_bp.route("/donations/stats", methods=["GET"])
@session_required
def donation_stats():
    return jsonify(donation_service.donation_stats(gateway=get_gateway())), 200


@dashboard_bp.route("/donations/<donation_id>", methods=["GET"])
@session_required
def get_donation(donation_id):
    donation = donation_service.get_donation(gateway=get_gateway(), donation_id=donation_id)
    return jsonify(normalize_donation(donation)), 200


@dashboard_bp.route("/donations/<donation_id>", methods=["PUT"])
@session_required
def update_donation(donation_id):
    donation = donation_service.update_donation_status(
        gateway=get_gateway(),
        donation_id=donation_id,
        status=json_body().get("status"),
    )
    return jsonify(normalize_donation(donation)), 200
