from flask import current_app, jsonify
from werkzeug.exceptions import MethodNotAllowed, NotFound, RequestEntityTooLarge

from portfolio.domain.invariants.exceptions import DuplicateSlug, InvariantViolation
from portfolio.gateway import AuthError, ConstraintViolation, GatewayError, RecordNotFound


def error_response(error, message, status_code):
    response = jsonify({
        "error": error,
        "message": message
    })
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return error_response("InvariantViolation", str(error), 400)

    @app.errorhandler(DuplicateSlug)
    def handle_duplicate_slug(error):
        return error_response("DuplicateSlug", str(error), 409)

    @app.errorhandler(ConstraintViolation)
    def handle_constraint_violation(error):
        current_app.logger.warning("Constraint violation: %s", error)
        return error_response("ConstraintViolation", str(error), 409)

    @app.errorhandler(RecordNotFound)
    def handle_record_not_found(error):
        return error_response("NotFound", str(error), 404)

    @app.errorhandler(AuthError)
    def handle_auth_error(error):
        return error_response("AuthError", str(error), 401)

    @app.errorhandler(GatewayError)
    def handle_gateway_error(error):
        current_app.logger.error("Gateway error: %s", error)
        return error_response(type(error).__name__, str(error), 502)

    @app.errorhandler(NotFound)
    def handle_not_found(error):
        return error_response("NotFound", "The requested URL was not found.", 404)

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(error):
        return error_response("MethodNotAllowed", "Method not allowed for this URL.", 405)

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(error):
        return error_response("RequestEntityTooLarge", "Uploaded file is too large.", 413)
