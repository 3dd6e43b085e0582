# portfolio/api/site/pages.py
from flask import jsonify, request

from portfolio.application import blog as blog_service
from portfolio.application import projects as project_service
from portfolio.application import services as service_catalog
from portfolio.application.settings import get_settings
from portfolio.gateway import get_gateway
from portfolio.normalizers.blog_post import normalize_blog_post
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.normalizers.project import normalize_project
from portfolio.normalizers.service import normalize_service
from portfolio.utils.decorators import page_view
from . import site_bp

MAX_PER_PAGE = 50


@site_bp.route("/", methods=["GET"])
@page_view
def home():
    gateway = get_gateway()

    projects = project_service.list_projects(gateway=gateway, featured=True, limit=6)
    posts, _ = blog_service.list_published_posts(gateway=gateway, per_page=3)
    services = service_catalog.list_services(gateway=gateway, featured_only=True)

    return jsonify({
        "settings": get_settings(gateway=gateway),
        "featured_projects": [normalize_project(p) for p in projects],
        "latest_posts": [normalize_blog_post(p, summary=True) for p in posts],
        "featured_services": [normalize_service(s) for s in services],
    }), 200


@site_bp.route("/projects", methods=["GET"])
@page_view
def projects():
    featured = request.args.get("featured", type=lambda v: v.lower() == "true")
    items = project_service.list_projects(gateway=get_gateway(), featured=featured)
    return jsonify(normalize_pagination(items, normalize_project)), 200


@site_bp.route("/projects/<slug>", methods=["GET"])
@page_view
def project_detail(slug):
    project = project_service.get_project_by_slug(gateway=get_gateway(), slug=slug)
    return jsonify(normalize_project(project)), 200


@site_bp.route("/blog", methods=["GET"])
@page_view
def blog():
    page_num = max(request.args.get("page", 1, type=int), 1)
    per_page = min(max(request.args.get("per_page", 10, type=int), 1), MAX_PER_PAGE)

    posts, total = blog_service.list_published_posts(
        gateway=get_gateway(),
        category=request.args.get("category") or None,
        featured=request.args.get("featured", type=lambda v: v.lower() == "true"),
        page=page_num,
        per_page=per_page,
    )

    return jsonify(
        normalize_pagination(
            posts,
            lambda p: normalize_blog_post(p, summary=True),
            page=page_num,
            per_page=per_page,
            total=total,
        )
    ), 200


@site_bp.route("/blog/<slug>", methods=["GET"])
@page_view
def blog_post(slug):
    post = blog_service.get_published_post(gateway=get_gateway(), slug=slug)
    return jsonify(normalize_blog_post(post)), 200


@site_bp.route("/services", methods=["GET"])
@page_view
def services():
    featured_only = request.args.get("featured", "").lower() == "true"
    items = service_catalog.list_services(gateway=get_gateway(), featured_only=featured_only)
    return jsonify(normalize_pagination(items, normalize_service)), 200
