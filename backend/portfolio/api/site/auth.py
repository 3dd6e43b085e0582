# portfolio/api/site/auth.py
from flask import current_app, g, jsonify, request

from portfolio.auth import SIGN_IN_PATH, get_session_controller
from portfolio.gateway import AuthError, GatewayError
from portfolio.gateway.auth import MIN_PASSWORD_LENGTH
from . import site_bp

DASHBOARD_PATH = "/dashboard"


def looks_like_credential(email, password):
    return "@" in email and len(password) >= MIN_PASSWORD_LENGTH


def session_payload(session):
    return {
        "user": session.user.to_dict(),
        "access_token": session.access_token,
        "expires_at": session.expires_at.isoformat() if session.expires_at else None,
    }


@site_bp.route("/auth", methods=["GET"])
def auth_status():
    controller = get_session_controller()
    state = controller.state

    if state.is_authenticated:
        return jsonify({
            "status": state.status,
            "user": state.user.to_dict(),
            "redirect_to": DASHBOARD_PATH
        }), 200

    return jsonify({"status": state.status}), 200


@site_bp.route("/auth", methods=["POST"])
def sign_in():
    data = request.get_json(silent=True) or request.form.to_dict()
    if not isinstance(data, dict):
        data = {}
    email = data.get("email") or ""
    password = data.get("password") or ""
    if isinstance(email, str):
        email = email.strip()

    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        return jsonify({"error": "Email and password required"}), 400

    controller = get_session_controller()

    try:
        session = controller.auth.sign_in(email, password)
    except AuthError as exc:
        current_app.logger.info("Sign-in rejected for %s: %s", email, exc)
        session = None
        if current_app.config.get("AUTH_SIGNUP_FALLBACK") and looks_like_credential(email, password):
            try:
                session = controller.auth.sign_up(email, password)
                current_app.logger.info("Created account for %s after failed sign-in", email)
            except GatewayError as signup_exc:
                current_app.logger.info("Sign-up fallback failed for %s: %s", email, signup_exc)

        if session is None:
            controller.notify("Error signing in", str(exc))
            return jsonify({"error": str(exc)}), 401

    g.current_user = session.user

    return jsonify({
        **session_payload(session),
        "message": "Signed in successfully",
        "redirect_to": DASHBOARD_PATH
    }), 200


@site_bp.route("/auth/sign-out", methods=["POST"])
def sign_out():
    controller = get_session_controller()
    controller.sign_out()

    return jsonify({
        "message": "Signed out successfully",
        "redirect_to": g.get("redirect_to") or SIGN_IN_PATH
    }), 200
