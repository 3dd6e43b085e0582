from flask import send_from_directory

from portfolio.utils.media import upload_root
from . import site_bp


@site_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(upload_root(), filename)
