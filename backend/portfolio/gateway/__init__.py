from flask import current_app, g, request

from .base import (
    SIGNED_IN,
    SIGNED_OUT,
    AuthError,
    AuthGateway,
    ConstraintViolation,
    Gateway,
    GatewayError,
    GatewayUnavailable,
    Identity,
    RecordNotFound,
    Session,
    Subscription,
)
from .sql import SqlGateway


def bearer_token(req) -> str | None:
    header = req.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() == "bearer" and token:
        return token.strip()
    return None


def default_gateway_factory(req) -> Gateway:
    return SqlGateway(access_token=bearer_token(req))


def init_gateway(app, factory=None) -> None:
    app.extensions["gateway_factory"] = factory or default_gateway_factory

    @app.teardown_request
    def drop_gateway(exc):
        g.pop("gateway", None)


def get_gateway() -> Gateway:
    """Request-scoped gateway client, built by the app's configured factory."""
    if "gateway" not in g:
        factory = current_app.extensions.get("gateway_factory", default_gateway_factory)
        g.gateway = factory(request)
    return g.gateway


__all__ = [
    "SIGNED_IN",
    "SIGNED_OUT",
    "AuthError",
    "AuthGateway",
    "ConstraintViolation",
    "Gateway",
    "GatewayError",
    "GatewayUnavailable",
    "Identity",
    "RecordNotFound",
    "Session",
    "Subscription",
    "SqlGateway",
    "bearer_token",
    "get_gateway",
    "init_gateway",
]
