# portfolio/api/dashboard/analytics.py
from datetime import datetime, timedelta, timezone

from dateutil.parser import parse
from flask import jsonify, request

from portfolio.application.analytics import analytics_summary
from portfolio.domain.invariants.exceptions import InvariantViolation
from portfolio.gateway import get_gateway
from portfolio.utils.decorators import session_required
from . import dashboard_bp

DEFAULT_DAYS = 30


def _parse_timestamp(name):
    raw = request.args.get(name)
    if not raw:
        return None
    try:
        value = parse(raw)
    except (ValueError, OverflowError):
        raise InvariantViolation(f"Invalid {name} timestamp: '{raw}'") from None

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dashboard_bp.route("/analytics", methods=["GET"])
@session_required
def analytics():
    since = _parse_timestamp("since")
    until = _parse_timestamp("until")

    if since is None:
        days = request.args.get("days", DEFAULT_DAYS, type=int)
        if days is None or days <= 0:
            raise InvariantViolation("days must be a positive integer.")
        since = datetime.now(timezone.utc) - timedelta(days=days)

    if until is not None and until < since:
        raise InvariantViolation("until must not be earlier than since.")

    return jsonify(analytics_summary(gateway=get_gateway(), since=since, until=until)), 200
