# portfolio/application/purchases.py
from typing import Any, Dict, List

from portfolio.domain.invariants.exceptions import InvariantViolation
from portfolio.domain.invariants.fields import assert_text
from portfolio.domain.invariants.service_purchase import (
    assert_purchase_status,
    assert_service_purchase,
)
from portfolio.gateway import Gateway
from .common import blank_to_none, pick_fields, require_record
from .services import get_active_service

TABLE = "service_purchases"

PURCHASE_FIELDS = ("client_name", "client_email", "client_phone", "message", "purchase_type")


def submit_service_purchase(
    *,
    gateway: Gateway,
    service_id: str,
    data: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Record a purchase request or an inquiry for an active service.

    Responsibilities:
    - form validation (before any gateway call)
    - snapshot of the service's price and currency at submit time
    """
    record = pick_fields(data, PURCHASE_FIELDS)
    assert_text(record, *PURCHASE_FIELDS)
    record.setdefault("purchase_type", "purchase")
    blank_to_none(record, "client_phone", "message")

    assert_service_purchase(record)

    service = get_active_service(gateway=gateway, service_id=service_id)

    if record["purchase_type"] == "purchase":
        if service.get("price") is None:
            raise InvariantViolation("This service is available by inquiry only.")
        record["amount"] = service["price"]
    else:
        record["amount"] = None

    record["service_id"] = service["id"]
    record["currency"] = service.get("currency")
    record["status"] = "pending"

    return gateway.create(TABLE, record)


def list_purchases(*, gateway: Gateway) -> List[Dict[str, Any]]:
    """Newest first, each row carrying its service (or None once deleted)."""
    purchases = gateway.list(TABLE, order_by=["-created_at"])

    service_ids = sorted({p["service_id"] for p in purchases if p.get("service_id")})
    services = {}
    if service_ids:
        services = {s["id"]: s for s in gateway.list("services", filters={"id": service_ids})}

    return [{**p, "service": services.get(p.get("service_id"))} for p in purchases]


def update_purchase_status(*, gateway: Gateway, purchase_id: str, status: str) -> Dict[str, Any]:
    """Any known status may follow any other."""
    assert_purchase_status(status)
    require_record(gateway, TABLE, purchase_id)
    return gateway.update(TABLE, purchase_id, {"status": status})


def delete_purchase(*, gateway: Gateway, purchase_id: str) -> None:
    require_record(gateway, TABLE, purchase_id)
    gateway.delete(TABLE, purchase_id)
