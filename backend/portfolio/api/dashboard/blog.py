# portfolio/api/dashboard/blog.py
from flask import current_app, jsonify, request

from portfolio.application import blog as blog_service
from portfolio.gateway import get_gateway
from portfolio.normalizers.blog_post import normalize_blog_post
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.utils.decorators import session_required
from . import dashboard_bp, json_body


def _admin(post):
    return normalize_blog_post(post, admin=True)


@dashboard_bp.route("/blog", methods=["GET"])
@session_required
def list_posts():
    status = request.args.get("status")  # published | draft | None
    published = {"published": True, "draft": False}.get(status)

    posts = blog_service.list_blog_posts(gateway=get_gateway(), published=published)
    return jsonify(
        normalize_pagination(posts, lambda p: normalize_blog_post(p, admin=True, summary=True))
    ), 200


@dashboard_bp.route("/blog", methods=["POST"])
@session_required
def create_post():
    post = blog_service.create_blog_post(gateway=get_gateway(), data=json_body())
    current_app.logger.info("Blog post %s created (published=%s)", post["id"], post["published"])
    return jsonify(_admin(post)), 201


@dashboard_bp.route("/blog/<post_id>", methods=["GET"])
@session_required
def get_post(post_id):
    post = blog_service.get_blog_post(gateway=get_gateway(), post_id=post_id)
    return jsonify(_admin(post)), 200


@dashboard_bp.route("/blog/<post_id>", methods=["PUT"])
@session_required
def update_post(post_id):
    post = blog_service.update_blog_post(
        gateway=get_gateway(),
        post_id=post_id,
        data=json_body(),
    )
    return jsonify(_admin(post)), 200


@dashboard_bp.route("/blog/<post_id>/publish", methods=["POST"])
@session_required
def publish_post(post_id):
    post = blog_service.set_published(gateway=get_gateway(), post_id=post_id, published=True)
    return jsonify(_admin(post)), 200


@dashboard_bp.route("/blog/<post_id>/unpublish", methods=["POST"])
@session_required
def unpublish_post(post_id):
    post = blog_service.set_published(gateway=get_gateway(), post_id=post_id, published=False)
    return jsonify(_admin(post)), 200


@dashboard_bp.route("/blog/<post_id>", methods=["DELETE"])
@session_required
def delete_post(post_id):
    blog_service.delete_blog_post(gateway=get_gateway(), post_id=post_id)
    return jsonify({"message": "Blog post deleted successfully"}), 200
