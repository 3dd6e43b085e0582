# portfolio/api/dashboard/services.py
from flask import jsonify

from portfolio.application import services as service_catalog
from portfolio.gateway import get_gateway
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.normalizers.service import normalize_service
from portfolio.utils.decorators import session_required
from . import dashboard_bp, json_body


def _admin(service):
    return normalize_service(service, admin=True)


@dashboard_bp.route("/services", methods=["GET"])
@session_required
def list_services():
    services = service_catalog.list_services(gateway=get_gateway(), include_inactive=True)
    return jsonify(normalize_pagination(services, _admin)), 200


@dashboard_bp.route("/services", methods=["POST"])
@session_required
def create_service():
    service = service_catalog.create_service(gateway=get_gateway(), data=json_body())
    return jsonify(_admin(service)), 201


@dashboard_bp.route("/services/<service_id>", methods=["GET"])
@session_required
def get_service(service_id):
    service = service_catalog.get_service(gateway=get_gateway(), service_id=service_id)
    return jsonify(_admin(service)), 200


@dashboard_bp.route("/services/<service_id>", methods=["PUT"])
@session_required
def update_service(service_id):
    service = service_catalog.update_service(
        gateway=get_gateway(),
        service_id=service_id,
        data=json_body(),
    )
    return jsonify(_admin(service)), 200


@dashboard_bp.route("/services/<service_id>", methods=["DELETE"])
@session_required
def delete_service(service_id):
    service_catalog.delete_service(gateway=get_gateway(), service_id=service_id)
    return jsonify({"message": "Service deleted successfully"}), 200
