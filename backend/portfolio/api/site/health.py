from flask import jsonify
from . import site_bp


@site_bp.route("/health", methods=["GET"])
def health_check():
    return jsonify({
        "status": "ok",
        "service": "portfolio"
    })
