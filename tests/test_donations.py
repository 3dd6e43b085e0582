import pytest

from portfolio.application.donations import convert_currency, format_currency
from portfolio.models import Donation


def donation_payload(**overrides):
    payload = {
        "name": "Linus",
        "email": "linus@example.com",
        "amount": "25",
        "currency": "usd",
    }
    payload.update(overrides)
    return payload


def test_currency_helpers():
    assert convert_currency(10, "USD", "TZS") == 25000
    assert convert_currency(5000, "TZS", "USD") == 2
    assert convert_currency(7, "USD", "USD") == 7
    assert convert_currency(7, "EUR", "USD") == 7

    assert format_currency(1234.5, "USD") == "$1,234.50"
    assert format_currency(2500, "TZS") == "TSh 2,500.00"


def test_donation_is_recorded_as_pending(app, client):
    response = client.post("/donate", json=donation_payload())

    assert response.status_code == 201
    assert response.get_json()["status"] == "pending"
    with app.app_context():
        donation = Donation.query.one()
        assert donation.amount == 25.0
        assert donation.currency == "USD"
        assert donation.payment_method == "website_form"


@pytest.mark.parametrize(
    "overrides",
    [
        {"amount": "0"},
        {"amount": "-10"},
        {"amount": "lots"},
        {"amount": ""},
        {"currency": "EUR"},
        {"email": "nope"},
        {"name": ""},
        {"currency": 5},
        {"name": ["Ada"]},
    ],
)
def test_invalid_donations_are_rejected(app, client, overrides):
    response = client.post("/donate", json=donation_payload(**overrides))

    assert response.status_code == 400
    with app.app_context():
        assert Donation.query.count() == 0


def test_donation_stats(owner_client):
    owner_client.post("/donate", json=donation_payload(amount="20"))
    owner_client.post("/donate", json=donation_payload(amount="10"))
    owner_client.post("/donate", json=donation_payload(amount="50000", currency="TZS"))

    stats = owner_client.get("/dashboard/donations/stats").get_json()

    assert stats["total_usd"] == 30.0
    assert stats["total_tzs"] == 50000.0
    assert stats["total_usd_equivalent"] == 50.0
    assert stats["count"] == 3
    assert stats["average_usd"] == 16.67
    assert stats["by_status"] == {"completed": 0, "failed": 0, "pending": 3}
    assert stats["formatted"] == {"total_usd": "$30.00", "total_tzs": "TSh 50,000.00"}


def test_empty_donation_stats(owner_client):
    stats = owner_client.get("/dashboard/donations/stats").get_json()

    assert stats["count"] == 0
    assert stats["average_usd"] == 0.0


def test_donation_status_update_and_filter(owner_client):
    donation_id = owner_client.post("/donate", json=donation_payload()).get_json()["id"]
    owner_client.post("/donate", json=donation_payload(name="Other"))

    response = owner_client.put(f"/dashboard/donations/{donation_id}", json={"status": "completed"})
    assert response.get_json()["status"] == "completed"

    completed = owner_client.get("/dashboard/donations?status=completed").get_json()["items"]
    assert [d["id"] for d in completed] == [donation_id]

    assert owner_client.put(
        f"/dashboard/donations/{donation_id}", json={"status": "refunded"}
    ).status_code == 400
    assert owner_client.get("/dashboard/donations?status=refunded").status_code == 400


def test_unknown_donation(owner_client):
    assert owner_client.get("/dashboard/donations/missing").status_code == 404
