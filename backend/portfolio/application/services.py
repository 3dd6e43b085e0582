# portfolio/application/services.py
from typing import Any, Dict, List

from portfolio.domain.invariants.fields import as_bool, assert_text
from portfolio.domain.invariants.service import assert_service
from portfolio.gateway import Gateway, RecordNotFound
from portfolio.utils.order import next_order_index
from .common import blank_to_none, clean_string_list, pick_fields, require_record

TABLE = "services"

SERVICE_FIELDS = (
    "title",
    "description",
    "short_description",
    "category",
    "pricing_type",
    "price",
    "currency",
    "image_url",
    "video_url",
    "features",
    "featured",
    "is_active",
    "order_index",
)

TEXT_FIELDS = (
    "title",
    "description",
    "short_description",
    "category",
    "pricing_type",
    "currency",
    "image_url",
    "video_url",
)

DEFAULT_CURRENCY = "USD"


def create_service(*, gateway: Gateway, data: Dict[str, Any]) -> Dict[str, Any]:
    record = pick_fields(data, SERVICE_FIELDS)
    assert_text(record, *TEXT_FIELDS)
    blank_to_none(record, "short_description", "category", "image_url", "video_url")

    record.setdefault("pricing_type", "fixed")
    record["currency"] = (record.get("currency") or DEFAULT_CURRENCY).upper()
    record["features"] = clean_string_list(record.get("features"), "features")
    record["featured"] = as_bool(record.get("featured"), "featured")
    record["is_active"] = as_bool(record.get("is_active", True), "is_active")

    # Inquiry-only services never carry a price
    record["price"] = assert_service(record)

    if record.get("order_index") is None:
        record["order_index"] = next_order_index(gateway, TABLE)

    return gateway.create(TABLE, record)


def update_service(
    *,
    gateway: Gateway,
    service_id: str,
    data: Dict[str, Any],
) -> Dict[str, Any]:
    current = require_record(gateway, TABLE, service_id)

    changes = pick_fields(data, SERVICE_FIELDS)
    assert_text(changes, *TEXT_FIELDS)
    blank_to_none(changes, "short_description", "category", "image_url", "video_url")

    if "features" in changes:
        changes["features"] = clean_string_list(changes["features"], "features")
    for flag in ("featured", "is_active"):
        if flag in changes:
            changes[flag] = as_bool(changes[flag], flag)
    if "currency" in changes:
        changes["currency"] = (changes["currency"] or DEFAULT_CURRENCY).upper()

    merged = {**current, **changes}
    price = assert_service(merged)
    if price != current.get("price"):
        changes["price"] = price

    return gateway.update(TABLE, service_id, changes)


def delete_service(*, gateway: Gateway, service_id: str) -> None:
    """Purchases keep their snapshot; their service reference is cleared."""
    require_record(gateway, TABLE, service_id)
    gateway.delete(TABLE, service_id)


def get_service(*, gateway: Gateway, service_id: str) -> Dict[str, Any]:
    return require_record(gateway, TABLE, service_id)


def get_active_service(*, gateway: Gateway, service_id: str) -> Dict[str, Any]:
    service = gateway.get(TABLE, id=service_id, is_active=True)
    if service is None:
        raise RecordNotFound(f"Service {service_id} not found")
    return service


def list_services(
    *,
    gateway: Gateway,
    featured_only: bool = False,
    include_inactive: bool = False,
) -> List[Dict[str, Any]]:
    filters: Dict[str, Any] = {}
    if not include_inactive:
        filters["is_active"] = True
    if featured_only:
        filters["featured"] = True
    return gateway.list(TABLE, filters=filters, order_by=["order_index"])
