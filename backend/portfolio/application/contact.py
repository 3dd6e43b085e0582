# portfolio/application/contact.py
import logging
from typing import Any, Dict, List, Optional

from portfolio.domain.invariants.contact import assert_contact_message
from portfolio.domain.invariants.fields import assert_text
from portfolio.gateway import Gateway
from portfolio.integrations.webhook import relay_contact_message
from .common import blank_to_none, pick_fields, require_record

logger = logging.getLogger(__name__)

TABLE = "contact_messages"

CONTACT_FIELDS = ("name", "email", "phone", "subject", "message")


def submit_contact_message(*, gateway: Gateway, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Store a message from the public contact form, then relay it to the
    configured webhook. A failed relay does not fail the submission.
    """
    record = pick_fields(data, CONTACT_FIELDS)
    assert_text(record, *CONTACT_FIELDS)
    blank_to_none(record, "phone")
    for field in ("name", "email", "subject", "message"):
        if isinstance(record.get(field), str):
            record[field] = record[field].strip()

    assert_contact_message(record)

    record["is_read"] = False
    record["is_archived"] = False
    message = gateway.create(TABLE, record)

    relay_contact_message(message)
    return message


def list_messages(
    *,
    gateway: Gateway,
    unread_only: bool = False,
    archived_only: bool = False,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> List[Dict[str, Any]]:
    filters: Dict[str, Any] = {}
    if unread_only:
        filters["is_read"] = False
    if archived_only:
        filters["is_archived"] = True

    return gateway.list(
        TABLE,
        filters=filters,
        order_by=["-created_at"],
        limit=limit,
        offset=offset,
    )


def get_message(*, gateway: Gateway, message_id: str) -> Dict[str, Any]:
    return require_record(gateway, TABLE, message_id)


def mark_message_read(*, gateway: Gateway, message_id: str) -> Dict[str, Any]:
    require_record(gateway, TABLE, message_id)
    return gateway.update(TABLE, message_id, {"is_read": True})


def archive_message(*, gateway: Gateway, message_id: str) -> Dict[str, Any]:
    require_record(gateway, TABLE, message_id)
    return gateway.update(TABLE, message_id, {"is_archived": True})


def delete_message(*, gateway: Gateway, message_id: str) -> None:
    require_record(gateway, TABLE, message_id)
    gateway.delete(TABLE, message_id)
