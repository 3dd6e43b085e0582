# portfolio/application/settings.py
import copy
from typing import Any, Dict

from portfolio.domain.invariants.exceptions import InvariantViolation
from portfolio.domain.invariants.fields import assert_email, assert_text
from portfolio.gateway import Gateway

TABLE = "settings"
SETTINGS_ID = "1"

SETTING_KEYS = ("site_name", "site_description", "contact_email")
SOCIAL_NETWORKS = ("twitter", "linkedin", "github", "facebook")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "site_name": "",
    "site_description": "",
    "contact_email": "",
    "social_links": {network: "" for network in SOCIAL_NETWORKS},
}


def _merge(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    merged = {**base, **{k: v for k, v in updates.items() if k != "social_links"}}
    merged["social_links"] = {
        **(base.get("social_links") or {}),
        **(updates.get("social_links") or {}),
    }
    return merged


def get_settings(*, gateway: Gateway) -> Dict[str, Any]:
    """Stored site settings laid over the defaults."""
    row = gateway.get(TABLE, id=SETTINGS_ID)
    stored = (row or {}).get("value") or {}
    return _merge(copy.deepcopy(DEFAULT_SETTINGS), stored)


def update_settings(*, gateway: Gateway, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge ``data`` into the stored settings. ``social_links`` is merged per
    network, so updating one link keeps the others.
    """
    data = data or {}
    if not isinstance(data, dict):
        raise InvariantViolation("Expected a JSON object.")
    updates = {key: data[key] for key in SETTING_KEYS if key in data}
    assert_text(updates, *SETTING_KEYS)

    social_links = data.get("social_links")
    if social_links is not None:
        if not isinstance(social_links, dict):
            raise InvariantViolation("social_links must be an object.")
        unknown = sorted(set(social_links) - set(SOCIAL_NETWORKS))
        if unknown:
            raise InvariantViolation(f"Unknown social networks: {', '.join(unknown)}")
        assert_text(social_links, *social_links)
        updates["social_links"] = social_links

    if updates.get("contact_email"):
        assert_email(updates["contact_email"], "contact_email")

    row = gateway.get(TABLE, id=SETTINGS_ID)
    if row is None:
        value = _merge(copy.deepcopy(DEFAULT_SETTINGS), updates)
        gateway.create(TABLE, {"id": SETTINGS_ID, "value": value})
        return value

    value = _merge(_merge(copy.deepcopy(DEFAULT_SETTINGS), row.get("value") or {}), updates)
    gateway.update(TABLE, SETTINGS_ID, {"value": value})
    return value


def seed_settings(*, gateway: Gateway) -> bool:
    """Create the settings row with defaults if it is missing."""
    if gateway.get(TABLE, id=SETTINGS_ID) is not None:
        return False
    gateway.create(TABLE, {"id": SETTINGS_ID, "value": copy.deepcopy(DEFAULT_SETTINGS)})
    return True
