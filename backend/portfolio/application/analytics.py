# portfolio/application/analytics.py
import logging
import re
from collections import Counter
from datetime import datetime
from typing import Any, Dict, List, Optional

from portfolio.gateway import Gateway, GatewayError

logger = logging.getLogger(__name__)

TABLE = "page_views"

_MOBILE = re.compile(r"mobile", re.IGNORECASE)
_TABLET = re.compile(r"tablet", re.IGNORECASE)


def classify_device(user_agent: Optional[str]) -> str:
    if _MOBILE.search(user_agent or ""):
        return "mobile"
    if _TABLET.search(user_agent or ""):
        return "tablet"
    return "desktop"


def track_page_view(
    *,
    gateway: Gateway,
    path: str,
    user_agent: Optional[str] = None,
    referrer: Optional[str] = None,
    ip_address: Optional[str] = None,
) -> bool:
    """
    Record one page view. Fire-and-forget: any failure is logged and the
    caller carries on.
    """
    try:
        gateway.create(
            TABLE,
            {
                "page_path": path,
                "device_type": classify_device(user_agent),
                "referrer": referrer or "direct",
                "user_agent": user_agent,
                "ip_address": ip_address,
            },
        )
    except GatewayError as exc:
        logger.warning("Error tracking page view for %s: %s", path, exc)
        return False
    return True


def _ranked(counter: Counter, key: str, limit: int) -> List[Dict[str, Any]]:
    return [{key: name, "views": views} for name, views in counter.most_common(limit)]


def analytics_summary(
    *,
    gateway: Gateway,
    since: Optional[datetime] = None,
    until: Optional[datetime] = None,
    limit: int = 10,
) -> Dict[str, Any]:
    """
    Aggregate page views inside [since, until].

    Grouping happens here rather than in the store, so any gateway that can
    list rows can serve the dashboard.
    """
    views = gateway.list(TABLE, since=since, until=until, order_by=["created_at"])

    pages = Counter(v["page_path"] for v in views)
    devices = Counter(v.get("device_type") or "desktop" for v in views)
    referrers = Counter(v.get("referrer") or "direct" for v in views)
    per_day = Counter(v["created_at"].date().isoformat() for v in views if v.get("created_at"))

    return {
        "range": {
            "since": since.isoformat() if since else None,
            "until": until.isoformat() if until else None,
        },
        "total_views": len(views),
        "popular_pages": _ranked(pages, "page_path", limit),
        "device_stats": [
            {"device_type": device, "count": count}
            for device, count in devices.most_common()
        ],
        "referrer_stats": _ranked(referrers, "referrer", limit),
        "views_per_day": [{"date": day, "views": per_day[day]} for day in sorted(per_day)],
    }
