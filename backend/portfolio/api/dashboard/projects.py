# portfolio/api/dashboard/projects.py
from flask import current_app, jsonify

from portfolio.application import projects as project_service
from portfolio.gateway import get_gateway
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.normalizers.project import normalize_project
from portfolio.utils.decorators import session_required
from . import dashboard_bp, json_body


def _admin(project):
    return normalize_project(project, admin=True)


@dashboard_bp.route("/projects", methods=["GET"])
@session_required
def list_projects():
    projects = project_service.list_projects(gateway=get_gateway())
    return jsonify(normalize_pagination(projects, _admin)), 200


@dashboard_bp.route("/projects", methods=["POST"])
@session_required
def create_project():
    project = project_service.create_project(gateway=get_gateway(), data=json_body())
    current_app.logger.info("Project %s created", project["id"])
    return jsonify(_admin(project)), 201


@dashboard_bp.route("/projects/<project_id>", methods=["GET"])
@session_required
def get_project(project_id):
    project = project_service.get_project(gateway=get_gateway(), project_id=project_id)
    return jsonify(_admin(project)), 200


@dashboard_bp.route("/projects/<project_id>", methods=["PUT"])
@session_required
def update_project(project_id):
    project = project_service.update_project(
        gateway=get_gateway(),
        project_id=project_id,
        data=json_body(),
    )
    return jsonify(_admin(project)), 200


@dashboard_bp.route("/projects/<project_id>", methods=["DELETE"])
@session_required
def delete_project(project_id):
    project_service.delete_project(gateway=get_gateway(), project_id=project_id)
    return jsonify({"message": "Project deleted successfully"}), 200
