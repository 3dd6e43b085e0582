import json

import httpx
import pytest
import respx

from portfolio.models import ContactMessage

WEBHOOK_URL = "https://hooks.example.com/contact"


def message_payload(**overrides):
    payload = {
        "name": "  Grace  ",
        "email": "grace@example.com",
        "subject": "Project enquiry",
        "message": "Could you build us a site?",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def webhook(app):
    app.config["CONTACT_WEBHOOK_URL"] = WEBHOOK_URL
    with respx.mock(assert_all_called=False) as router:
        yield router


def test_submit_contact_message(app, client):
    response = client.post("/contact", json=message_payload())

    assert response.status_code == 201
    with app.app_context():
        message = ContactMessage.query.one()
        assert message.name == "Grace"
        assert message.is_read is False
        assert message.is_archived is False


@pytest.mark.parametrize("field", ["name", "email", "subject", "message"])
def test_required_contact_fields(app, client, field):
    response = client.post("/contact", json=message_payload(**{field: ""}))

    assert response.status_code == 400
    with app.app_context():
        assert ContactMessage.query.count() == 0


def test_invalid_email_is_rejected(client):
    response = client.post("/contact", json=message_payload(email="grace@"))
    assert response.status_code == 400


def test_stored_message_is_relayed_to_webhook(client, webhook):
    route = webhook.post(WEBHOOK_URL).mock(return_value=httpx.Response(200))

    response = client.post("/contact", data=message_payload(phone="+1 555 0100"))

    assert response.status_code == 201
    assert route.called
    sent = json.loads(route.calls.last.request.content)
    assert sent["subject"] == "Project enquiry"
    assert sent["phone"] == "+1 555 0100"
    assert sent["id"] == response.get_json()["id"]


def test_webhook_failure_does_not_fail_the_submission(app, client, webhook):
    webhook.post(WEBHOOK_URL).mock(side_effect=httpx.ConnectError("refused"))

    response = client.post("/contact", json=message_payload())

    assert response.status_code == 201
    with app.app_context():
        assert ContactMessage.query.count() == 1


def test_webhook_error_status_does_not_fail_the_submission(client, webhook):
    route = webhook.post(WEBHOOK_URL).mock(return_value=httpx.Response(500))

    assert client.post("/contact", json=message_payload()).status_code == 201
    assert route.called


def test_no_webhook_configured(client):
    with respx.mock(assert_all_called=False) as router:
        response = client.post("/contact", json=message_payload())

    assert response.status_code == 201
    assert not router.calls


# -------------------------------------------------
# Dashboard inbox
# -------------------------------------------------
def test_inbox_read_archive_and_delete(owner_client):
    owner_client.post("/contact", json=message_payload(subject="First"))
    owner_client.post("/contact", json=message_payload(subject="Second"))

    inbox = owner_client.get("/dashboard/messages").get_json()["items"]
    assert {m["subject"] for m in inbox} == {"First", "Second"}
    first = next(m for m in inbox if m["subject"] == "First")

    read = owner_client.put(f"/dashboard/messages/{first['id']}", json={"is_read": True})
    assert read.get_json()["is_read"] is True

    unread = owner_client.get("/dashboard/messages?unread=true").get_json()["items"]
    assert [m["subject"] for m in unread] == ["Second"]

    archived = owner_client.put(f"/dashboard/messages/{first['id']}", json={"is_archived": True})
    assert archived.get_json()["is_archived"] is True
    assert archived.get_json()["is_read"] is True

    only_archived = owner_client.get("/dashboard/messages?archived=true").get_json()["items"]
    assert [m["id"] for m in only_archived] == [first["id"]]

    assert owner_client.delete(f"/dashboard/messages/{first['id']}").status_code == 200
    assert owner_client.get(f"/dashboard/messages/{first['id']}").status_code == 404


def test_inbox_limit(owner_client):
    for n in range(3):
        owner_client.post("/contact", json=message_payload(subject=f"Message {n}"))

    assert len(owner_client.get("/dashboard/messages?limit=2").get_json()["items"]) == 2


def test_inbox_requires_a_session(client):
    assert client.get("/dashboard/messages").status_code == 302


@pytest.mark.parametrize("overrides", [{"email": 5}, {"name": ["Grace"]}, {"message": {"text": "hi"}}])
def test_non_text_fields_are_rejected(app, client, overrides):
    response = client.post("/contact", json=message_payload(**overrides))

    assert response.status_code == 400
    with app.app_context():
        assert ContactMessage.query.count() == 0


def test_inbox_flags_given_as_text(owner_client):
    message = owner_client.post("/contact", json=message_payload()).get_json()
    url = f"/dashboard/messages/{message['id']}"

    assert owner_client.put(url, json={"is_read": "false"}).get_json()["is_read"] is False
    assert owner_client.put(url, json={"is_read": "maybe"}).status_code == 400
    assert owner_client.put(url, json=["is_read"]).status_code == 400
