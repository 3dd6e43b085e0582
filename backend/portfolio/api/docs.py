import os

from flask import abort, current_app, send_file
from flask_swagger_ui import get_swaggerui_blueprint

SWAGGER_URL = "/swagger"
OPENAPI_URL = "/openapi.yaml"


def openapi_path():
    return os.path.join(current_app.root_path, "api", "openapi.yaml")


def register_api_docs(app):
    """Serve the OpenAPI document and a Swagger UI that reads it."""

    @app.route(OPENAPI_URL, methods=["GET"], endpoint="openapi")
    def serve_openapi():
        path = openapi_path()
        if not os.path.exists(path):
            current_app.logger.error("OpenAPI document missing at %s", path)
            abort(404)
        return send_file(path, mimetype="application/yaml")

    swagger_bp = get_swaggerui_blueprint(
        SWAGGER_URL,
        OPENAPI_URL,
        config={"app_name": "Portfolio API", "deepLinking": True},
    )
    app.register_blueprint(swagger_bp, url_prefix=SWAGGER_URL)
