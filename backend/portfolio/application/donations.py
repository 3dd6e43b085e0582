# portfolio/application/donations.py
from typing import Any, Dict, List, Optional

from portfolio.domain.invariants.donation import (
    DONATION_STATUSES,
    assert_donation,
    assert_donation_status,
)
from portfolio.domain.invariants.fields import assert_text
from portfolio.gateway import Gateway
from .common import blank_to_none, pick_fields, require_record

TABLE = "donations"

# 1 USD = 2500 TZS
TZS_EXCHANGE_RATE = 2500

DONATION_FIELDS = ("name", "email", "amount", "currency", "message")


def convert_currency(amount: float, from_currency: str, to_currency: str) -> float:
    """Unsupported pairs are returned unchanged."""
    if from_currency == to_currency:
        return amount
    if from_currency == "USD" and to_currency == "TZS":
        return amount * TZS_EXCHANGE_RATE
    if from_currency == "TZS" and to_currency == "USD":
        return amount / TZS_EXCHANGE_RATE
    return amount


def format_currency(amount: float, currency: str) -> str:
    if currency == "USD":
        return f"${amount:,.2f}"
    if currency == "TZS":
        return f"TSh {amount:,.2f}"
    return f"{amount} {currency}"


def submit_donation(*, gateway: Gateway, data: Dict[str, Any]) -> Dict[str, Any]:
    record = pick_fields(data, DONATION_FIELDS)
    assert_text(record, "name", "email", "currency", "message")
    record["currency"] = (record.get("currency") or "USD").upper()
    blank_to_none(record, "message")

    record["amount"] = assert_donation(record)
    record["status"] = "pending"
    record["payment_method"] = "website_form"

    return gateway.create(TABLE, record)


def list_donations(
    *,
    gateway: Gateway,
    status: Optional[str] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> List[Dict[str, Any]]:
    filters = None
    if status:
        assert_donation_status(status)
        filters = {"status": status}

    return gateway.list(
        TABLE,
        filters=filters,
        order_by=["-created_at"],
        limit=limit,
        offset=offset,
    )


def get_donation(*, gateway: Gateway, donation_id: str) -> Dict[str, Any]:
    return require_record(gateway, TABLE, donation_id)


def update_donation_status(*, gateway: Gateway, donation_id: str, status: str) -> Dict[str, Any]:
    assert_donation_status(status)
    require_record(gateway, TABLE, donation_id)
    return gateway.update(TABLE, donation_id, {"status": status})


def donation_stats(*, gateway: Gateway) -> Dict[str, Any]:
    """
    Totals per currency, a USD-equivalent grand total and a count per status,
    computed over every donation on record.
    """
    donations = gateway.list(TABLE)

    totals = {"USD": 0.0, "TZS": 0.0}
    total_usd_equivalent = 0.0
    by_status = {status: 0 for status in sorted(DONATION_STATUSES)}

    for donation in donations:
        amount = float(donation.get("amount") or 0)
        currency = donation.get("currency")
        if currency in totals:
            totals[currency] += amount
        total_usd_equivalent += convert_currency(amount, currency, "USD")

        status = donation.get("status")
        if status in by_status:
            by_status[status] += 1

    count = len(donations)
    return {
        "total_usd": totals["USD"],
        "total_tzs": totals["TZS"],
        "total_usd_equivalent": round(total_usd_equivalent, 2),
        "average_usd": round(total_usd_equivalent / count, 2) if count else 0.0,
        "count": count,
        "by_status": by_status,
        "formatted": {
            "total_usd": format_currency(totals["USD"], "USD"),
            "total_tzs": format_currency(totals["TZS"], "TZS"),
        },
    }
