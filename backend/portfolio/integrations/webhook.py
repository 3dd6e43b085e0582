# portfolio/integrations/webhook.py
import logging
from typing import Any, Dict

import httpx
from flask import current_app

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ("name", "email", "phone", "subject", "message")


def relay_contact_message(message: Dict[str, Any]) -> bool:
    """
    Forward a stored contact message to the configured webhook.

    Best effort: failures are logged and reported as ``False``, never raised.
    """
    url = current_app.config.get("CONTACT_WEBHOOK_URL")
    if not url:
        return False

    payload = {field: message.get(field) for field in CONTACT_FIELDS}
    payload["id"] = message.get("id")

    try:
        response = httpx.post(
            url,
            json=payload,
            timeout=current_app.config.get("WEBHOOK_TIMEOUT", 5),
        )
        response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.warning("Contact webhook delivery failed: %s", exc)
        return False

    logger.info("Contact message %s relayed to webhook", message.get("id"))
    return True
