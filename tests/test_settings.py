from portfolio.extensions import db
from portfolio.models import Setting
from portfolio.models.user import User


def test_defaults_before_anything_is_saved(owner_client):
    settings = owner_client.get("/dashboard/settings").get_json()

    assert settings["site_name"] == ""
    assert settings["social_links"] == {"twitter": "", "linkedin": "", "github": "", "facebook": ""}


def test_social_links_are_merged_per_network(owner_client):
    owner_client.put(
        "/dashboard/settings",
        json={"site_name": "Jane Doe", "social_links": {"github": "https://github.com/jane"}},
    )

    response = owner_client.put(
        "/dashboard/settings",
        json={"social_links": {"twitter": "https://twitter.com/jane"}},
    )

    assert response.status_code == 200
    settings = owner_client.get("/dashboard/settings").get_json()
    assert settings["site_name"] == "Jane Doe"
    assert settings["social_links"]["github"] == "https://github.com/jane"
    assert settings["social_links"]["twitter"] == "https://twitter.com/jane"


def test_public_contact_page_uses_settings(owner_client, client):
    owner_client.put("/dashboard/settings", json={"contact_email": "hello@example.com"})

    body = client.get("/contact").get_json()

    assert body["contact_email"] == "hello@example.com"


def test_invalid_settings(owner_client):
    assert owner_client.put(
        "/dashboard/settings", json={"contact_email": "not-an-email"}
    ).status_code == 400
    assert owner_client.put(
        "/dashboard/settings", json={"social_links": {"myspace": "x"}}
    ).status_code == 400
    assert owner_client.put(
        "/dashboard/settings", json={"social_links": "github"}
    ).status_code == 400
    assert owner_client.put(
        "/dashboard/settings", json={"site_name": 42}
    ).status_code == 400
    assert owner_client.put(
        "/dashboard/settings", json={"social_links": {"github": 1}}
    ).status_code == 400
    assert owner_client.put("/dashboard/settings", json=["site_name"]).status_code == 400


def test_dashboard_overview(owner_client):
    owner_client.post("/contact", json={
        "name": "Grace",
        "email": "grace@example.com",
        "subject": "Hello",
        "message": "Hi there",
    })
    owner_client.post("/donate", json={
        "name": "Linus",
        "email": "linus@example.com",
        "amount": 15,
        "currency": "USD",
    })

    body = owner_client.get("/dashboard").get_json()

    assert body["counts"]["unread_messages"] == 1
    assert body["counts"]["projects"] == 0
    assert body["donations"] == {"total_usd": 15.0, "total_tzs": 0.0, "count": 1}
    assert [m["subject"] for m in body["recent_messages"]] == ["Hello"]


# -------------------------------------------------
# CLI
# -------------------------------------------------
def test_init_db_seeds_settings_once(app):
    runner = app.test_cli_runner()

    first = runner.invoke(args=["init-db"])
    second = runner.invoke(args=["init-db"])

    assert first.exit_code == 0
    assert "with default settings" in first.output
    assert "with default settings" not in second.output
    with app.app_context():
        assert db.session.get(Setting, "1") is not None


def test_create_user_command(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["create-user", "Owner@Example.com", "--password", "long-enough"])
    assert result.exit_code == 0

    duplicate = runner.invoke(args=["create-user", "owner@example.com", "--password", "long-enough"])
    assert duplicate.exit_code != 0

    with app.app_context():
        user = User.query.one()
        assert user.email == "owner@example.com"
        assert user.check_password("long-enough")


def test_create_user_rejects_short_passwords(app):
    result = app.test_cli_runner().invoke(args=["create-user", "x@example.com", "--password", "abc"])

    assert result.exit_code != 0
    with app.app_context():
        assert User.query.count() == 0
