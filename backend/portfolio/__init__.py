from flask import Flask
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.docs import register_api_docs
from .api.site import site_bp
from .api.dashboard import dashboard_bp
from .auth import init_session
from .cli import register_commands
from .gateway import init_gateway
from .logging_config import configure_logging
from .middleware.security_headers import security_headers_middleware
from .middleware.tracking import tracking_middleware
from .errors import register_error_handlers


def create_app(config_name: str = "development", gateway_factory=None) -> Flask:
    """
    Build the portfolio app.

    ``gateway_factory`` receives the current request and returns the
    ``Gateway`` used for it; the SQL gateway is used when omitted.
    """
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    if not app.testing:
        configure_logging(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    init_gateway(app, gateway_factory)

    # -------------------------------------------------
    # Request hooks
    # -------------------------------------------------
    init_session(app)
    tracking_middleware(app)
    security_headers_middleware(app)

    # -------------------------------------------------
    # Site, dashboard and docs
    # -------------------------------------------------
    app.register_blueprint(site_bp)
    app.register_blueprint(dashboard_bp, url_prefix="/dashboard")
    register_api_docs(app)

    register_error_handlers(app)
    register_commands(app)

    app.logger.debug("Portfolio app created with %s config", config_name)
    return app
