from flask import g, has_app_context
from portfolio.extensions import db
from portfolio.models.audit_log import AuditLog
from typing import Optional


def current_actor_id() -> Optional[str]:
    if not has_app_context():
        return None
    user = getattr(g, "current_user", None)
    return user.id if user else None


def log_action(
    *,
    action: str,
    table_name: str,
    record_id: str,
    payload: dict | None = None
):
    actor_id = current_actor_id()
    if actor_id is None:
        return  # Public writes (contact form, page views) are not audited

    log = AuditLog()
    log.actor_id = actor_id
    log.action = action
    log.table_name = table_name
    log.record_id = record_id
    log.payload = payload or {}

    db.session.add(log)
