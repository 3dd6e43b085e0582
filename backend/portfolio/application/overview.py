# portfolio/application/overview.py
from typing import Any, Dict

from portfolio.gateway import Gateway
from .donations import donation_stats
from .settings import get_settings


def dashboard_overview(*, gateway: Gateway) -> Dict[str, Any]:
    """Headline numbers for the dashboard home page."""
    donations = donation_stats(gateway=gateway)

    return {
        "counts": {
            "projects": gateway.count("projects"),
            "blog_posts": gateway.count("blog_posts"),
            "published_posts": gateway.count("blog_posts", filters={"published": True}),
            "unread_messages": gateway.count(
                "contact_messages", filters={"is_read": False, "is_archived": False}
            ),
            "active_services": gateway.count("services", filters={"is_active": True}),
            "service_purchases": gateway.count("service_purchases"),
            "pending_purchases": gateway.count("service_purchases", filters={"status": "pending"}),
        },
        "donations": {
            "total_usd": donations["total_usd"],
            "total_tzs": donations["total_tzs"],
            "count": donations["count"],
        },
        "recent_messages": gateway.list(
            "contact_messages",
            filters={"is_archived": False},
            order_by=["-created_at"],
            limit=5,
        ),
        "settings": get_settings(gateway=gateway),
    }
