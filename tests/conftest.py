"""Shared fixtures: an app on in-memory SQLite, clients and an owner account."""
from unittest.mock import MagicMock

import pytest

from portfolio import create_app
from portfolio.extensions import db
from portfolio.gateway import Gateway, SqlGateway
from portfolio.models.user import User

OWNER_EMAIL = "owner@example.com"
OWNER_PASSWORD = "correct-horse"


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def gateway(app):
    """A gateway for arranging and inspecting rows outside of requests."""
    with app.test_request_context():
        yield SqlGateway()


@pytest.fixture
def owner(app):
    with app.app_context():
        user = User()
        user.email = OWNER_EMAIL
        user.set_password(OWNER_PASSWORD)
        db.session.add(user)
        db.session.commit()
        return {"id": user.id, "email": user.email}


@pytest.fixture
def owner_client(client, owner):
    response = client.post("/auth", json={"email": OWNER_EMAIL, "password": OWNER_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def mock_gateway():
    """Gateway double for checking which calls a widget makes."""
    return MagicMock(spec=Gateway)
