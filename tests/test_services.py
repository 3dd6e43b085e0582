import pytest

from portfolio.application.purchases import submit_service_purchase
from portfolio.domain.invariants.exceptions import InvariantViolation
from portfolio.models import ServicePurchase


def service_payload(**overrides):
    payload = {
        "title": "Website Audit",
        "description": "A full review of performance and accessibility.",
        "price": "450",
        "currency": "usd",
        "features": "Lighthouse report, Accessibility fixes, Lighthouse report",
    }
    payload.update(overrides)
    return payload


def purchase_payload(**overrides):
    payload = {
        "client_name": "Ada Client",
        "client_email": "ada@example.com",
        "purchase_type": "purchase",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def service(owner_client):
    response = owner_client.post("/dashboard/services", json=service_payload())
    assert response.status_code == 201
    return response.get_json()


def test_fixed_price_service(service):
    assert service["pricing_type"] == "fixed"
    assert service["price"] == 450.0
    assert service["currency"] == "USD"
    assert service["features"] == ["Lighthouse report", "Accessibility fixes"]
    assert service["is_active"] is True


def test_inquiry_service_has_no_price(owner_client):
    response = owner_client.post(
        "/dashboard/services", json=service_payload(pricing_type="inquiry", price="999")
    )

    assert response.status_code == 201
    assert response.get_json()["price"] is None


@pytest.mark.parametrize("price", [None, "", "0", "-5", "abc"])
def test_fixed_price_service_needs_positive_price(owner_client, price):
    response = owner_client.post("/dashboard/services", json=service_payload(price=price))
    assert response.status_code == 400


def test_switching_to_inquiry_clears_price(owner_client, service):
    response = owner_client.put(
        f"/dashboard/services/{service['id']}", json={"pricing_type": "inquiry"}
    )

    assert response.status_code == 200
    assert response.get_json()["price"] is None


def test_inactive_services_are_hidden_from_the_public(owner_client, client, service):
    owner_client.post("/dashboard/services", json=service_payload(title="Retired", is_active=False))

    public = [s["title"] for s in client.get("/services").get_json()["items"]]
    owned = [s["title"] for s in owner_client.get("/dashboard/services").get_json()["items"]]

    assert public == ["Website Audit"]
    assert owned == ["Website Audit", "Retired"]


def test_inquiry_without_phone_fails_before_any_gateway_call(mock_gateway):
    with pytest.raises(InvariantViolation, match="Phone number"):
        submit_service_purchase(
            gateway=mock_gateway,
            service_id="service-1",
            data=purchase_payload(purchase_type="inquiry"),
        )

    assert mock_gateway.method_calls == []


def test_invalid_email_fails_before_any_gateway_call(mock_gateway):
    with pytest.raises(InvariantViolation):
        submit_service_purchase(
            gateway=mock_gateway,
            service_id="service-1",
            data=purchase_payload(client_email="not-an-email"),
        )

    assert mock_gateway.method_calls == []


def test_purchase_snapshots_price_and_currency(client, service):
    response = client.post(f"/services/{service['id']}/purchase", json=purchase_payload())

    assert response.status_code == 201
    body = response.get_json()
    assert body["amount"] == 450.0
    assert body["currency"] == "USD"
    assert body["status"] == "pending"


def test_purchase_keeps_snapshot_after_price_change(owner_client, service):
    owner_client.post(f"/services/{service['id']}/purchase", json=purchase_payload())
    owner_client.put(f"/dashboard/services/{service['id']}", json={"price": 900})

    purchase = owner_client.get("/dashboard/purchases").get_json()["items"][0]

    assert purchase["amount"] == 450.0
    assert purchase["service"] == {"id": service["id"], "title": "Website Audit"}


def test_inquiry_with_phone_is_accepted(client, service):
    response = client.post(
        f"/services/{service['id']}/purchase",
        data=purchase_payload(purchase_type="inquiry", client_phone="+255 700 000 000"),
    )

    assert response.status_code == 201
    assert response.get_json()["amount"] is None


def test_inquiry_only_service_cannot_be_purchased(owner_client):
    service = owner_client.post(
        "/dashboard/services", json=service_payload(pricing_type="inquiry")
    ).get_json()

    response = owner_client.post(f"/services/{service['id']}/purchase", json=purchase_payload())

    assert response.status_code == 400


def test_inactive_service_cannot_be_purchased(owner_client, service):
    owner_client.put(f"/dashboard/services/{service['id']}", json={"is_active": False})

    response = owner_client.post(f"/services/{service['id']}/purchase", json=purchase_payload())

    assert response.status_code == 404


def test_purchase_status_updates(owner_client, service):
    owner_client.post(f"/services/{service['id']}/purchase", json=purchase_payload())
    purchase_id = owner_client.get("/dashboard/purchases").get_json()["items"][0]["id"]

    confirmed = owner_client.put(f"/dashboard/purchases/{purchase_id}", json={"status": "confirmed"})
    assert confirmed.get_json()["status"] == "confirmed"

    # any known status may follow any other
    reopened = owner_client.put(f"/dashboard/purchases/{purchase_id}", json={"status": "pending"})
    assert reopened.status_code == 200

    invalid = owner_client.put(f"/dashboard/purchases/{purchase_id}", json={"status": "shipped"})
    assert invalid.status_code == 400


def test_deleting_a_service_keeps_its_purchases(app, owner_client, service):
    owner_client.post(f"/services/{service['id']}/purchase", json=purchase_payload())

    assert owner_client.delete(f"/dashboard/services/{service['id']}").status_code == 200

    purchase = owner_client.get("/dashboard/purchases").get_json()["items"][0]
    assert purchase["service_id"] is None
    assert purchase["service"] is None
    assert purchase["amount"] == 450.0

    with app.app_context():
        assert ServicePurchase.query.count() == 1


def test_service_deactivated_with_text_flag_is_hidden(owner_client, client, service):
    response = owner_client.put(f"/dashboard/services/{service['id']}", json={"is_active": "false"})

    assert response.status_code == 200
    assert response.get_json()["is_active"] is False
    assert client.get("/services").get_json()["items"] == []


@pytest.mark.parametrize("overrides", [{"features": 3}, {"title": 9}, {"is_active": "sometimes"}])
def test_wrongly_typed_service_fields_are_rejected(owner_client, overrides):
    response = owner_client.post("/dashboard/services", json=service_payload(**overrides))
    assert response.status_code == 400


def test_non_text_purchase_fields_are_rejected(app, client, service):
    response = client.post(
        f"/services/{service['id']}/purchase", json=purchase_payload(client_email=["ada@example.com"])
    )

    assert response.status_code == 400
    with app.app_context():
        assert ServicePurchase.query.count() == 0
