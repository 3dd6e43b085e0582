from flask import current_app, jsonify, request

from portfolio.application.media import upload_media
from portfolio.gateway import get_gateway
from portfolio.utils.decorators import session_required
from . import dashboard_bp


@dashboard_bp.route("/uploads", methods=["POST"])
@session_required
def upload():
    url = upload_media(
        gateway=get_gateway(),
        file=request.files.get("file"),
        folder=request.form.get("folder", ""),
    )
    current_app.logger.info("Uploaded media to %s", url)
    return jsonify({"url": url}), 201
