from flask import jsonify

from portfolio.application.content import generate_blog_content
from portfolio.gateway import get_gateway
from portfolio.utils.decorators import session_required
from . import dashboard_bp, json_body


@dashboard_bp.route("/content/generate", methods=["POST"])
@session_required
def generate_content():
    draft = generate_blog_content(
        gateway=get_gateway(),
        prompt=json_body().get("prompt") or "",
    )
    return jsonify(draft), 200
