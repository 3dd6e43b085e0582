# portfolio/application/common.py
from typing import Any, Dict, Iterable, List, Optional

from portfolio.domain.invariants.exceptions import DuplicateSlug, InvariantViolation
from portfolio.gateway import Gateway, RecordNotFound


def pick_fields(data: Optional[Dict[str, Any]], fields: Iterable[str]) -> Dict[str, Any]:
    """Keep only the writable fields of an incoming form payload."""
    data = data or {}
    if not isinstance(data, dict):
        raise InvariantViolation("Expected a JSON object.")
    return {field: data[field] for field in fields if field in data}


def clean_string_list(values: Any, field: str = "values") -> List[str]:
    """
    Trim, drop empties and de-duplicate (first occurrence wins).
    A comma separated string is accepted as well as a list.
    """
    if values is None:
        return []
    if isinstance(values, str):
        values = values.split(",")
    elif not isinstance(values, (list, tuple)):
        raise InvariantViolation(f"{field} must be a list of strings.")

    cleaned: List[str] = []
    for value in values:
        value = str(value).strip()
        if value and value not in cleaned:
            cleaned.append(value)
    return cleaned


def blank_to_none(record: Dict[str, Any], *fields: str) -> None:
    for field in fields:
        value = record.get(field)
        if isinstance(value, str) and not value.strip():
            record[field] = None


def require_record(gateway: Gateway, table: str, record_id: str) -> Dict[str, Any]:
    record = gateway.get(table, id=record_id)
    if record is None:
        raise RecordNotFound(f"{table} row {record_id} not found")
    return record


def assert_slug_available(
    gateway: Gateway,
    table: str,
    slug: str,
    *,
    exclude_id: Optional[str] = None,
) -> None:
    existing = gateway.get(table, slug=slug)
    if existing and existing["id"] != exclude_id:
        raise DuplicateSlug(table, slug)
