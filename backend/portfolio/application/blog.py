# portfolio/application/blog.py
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from flask import current_app

from portfolio.domain.invariants.blog_post import assert_blog_post
from portfolio.domain.invariants.exceptions import DuplicateSlug
from portfolio.domain.invariants.fields import as_bool, assert_text, is_blank
from portfolio.domain.lifecycle.blog_post import resolve_published_at
from portfolio.gateway import ConstraintViolation, Gateway, RecordNotFound
from portfolio.utils.slug import slugify
from .common import (
    assert_slug_available,
    blank_to_none,
    clean_string_list,
    pick_fields,
    require_record,
)

TABLE = "blog_posts"

# published_at is owned by the publication lifecycle, never by the form
BLOG_FIELDS = (
    "title",
    "slug",
    "subheading",
    "excerpt",
    "content",
    "author",
    "category",
    "tags",
    "image_url",
    "published",
    "featured",
)

TEXT_FIELDS = ("title", "slug", "subheading", "excerpt", "content", "author", "category", "image_url")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def create_blog_post(*, gateway: Gateway, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create a blog post, optionally published straight away.

    Responsibilities:
    - slug derivation and uniqueness
    - default author
    - first publication timestamp
    """
    record = pick_fields(data, BLOG_FIELDS)
    assert_text(record, *TEXT_FIELDS)
    blank_to_none(record, "subheading", "image_url")

    if is_blank(record.get("slug")):
        record["slug"] = slugify(record.get("title"))
    if is_blank(record.get("author")):
        record["author"] = current_app.config.get("SITE_AUTHOR")

    record["tags"] = clean_string_list(record.get("tags"), "tags")
    record["published"] = as_bool(record.get("published"), "published")
    record["featured"] = as_bool(record.get("featured"), "featured")

    assert_blog_post(record)
    assert_slug_available(gateway, TABLE, record["slug"])

    record["published_at"] = resolve_published_at(
        published=record["published"],
        current=None,
        now=_now(),
    )

    try:
        return gateway.create(TABLE, record)
    except ConstraintViolation as exc:
        raise DuplicateSlug(TABLE, record["slug"]) from exc


def update_blog_post(
    *,
    gateway: Gateway,
    post_id: str,
    data: Dict[str, Any],
) -> Dict[str, Any]:
    current = require_record(gateway, TABLE, post_id)

    changes = pick_fields(data, BLOG_FIELDS)
    assert_text(changes, *TEXT_FIELDS)
    blank_to_none(changes, "subheading", "image_url")

    if "tags" in changes:
        changes["tags"] = clean_string_list(changes["tags"], "tags")
    if "slug" in changes and is_blank(changes["slug"]):
        changes["slug"] = slugify(changes.get("title", current["title"]))
    if "published" in changes:
        changes["published"] = as_bool(changes["published"], "published")
    if "featured" in changes:
        changes["featured"] = as_bool(changes["featured"], "featured")

    merged = {**current, **changes}
    assert_blog_post(merged)

    if merged["slug"] != current["slug"]:
        assert_slug_available(gateway, TABLE, merged["slug"], exclude_id=post_id)

    published_at = resolve_published_at(
        published=merged["published"],
        current=current.get("published_at"),
        now=_now(),
    )
    if published_at != current.get("published_at"):
        changes["published_at"] = published_at

    try:
        return gateway.update(TABLE, post_id, changes)
    except ConstraintViolation as exc:
        raise DuplicateSlug(TABLE, merged["slug"]) from exc


def set_published(*, gateway: Gateway, post_id: str, published: bool) -> Dict[str, Any]:
    """Publish or unpublish a post. Unpublishing keeps ``published_at``."""
    return update_blog_post(gateway=gateway, post_id=post_id, data={"published": published})


def delete_blog_post(*, gateway: Gateway, post_id: str) -> None:
    require_record(gateway, TABLE, post_id)
    gateway.delete(TABLE, post_id)


def get_blog_post(*, gateway: Gateway, post_id: str) -> Dict[str, Any]:
    return require_record(gateway, TABLE, post_id)


def get_published_post(*, gateway: Gateway, slug: str) -> Dict[str, Any]:
    post = gateway.get(TABLE, slug=slug, published=True)
    if post is None:
        raise RecordNotFound(f"Blog post '{slug}' not found")
    return post


def list_published_posts(
    *,
    gateway: Gateway,
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    page: int = 1,
    per_page: int = 10,
) -> Tuple[List[Dict[str, Any]], int]:
    """
    Public blog listing, newest publication first.

    Returns the requested page of posts and the total number of matches.
    """
    filters: Dict[str, Any] = {"published": True}
    if category:
        filters["category"] = category
    if featured:
        filters["featured"] = True

    total = gateway.count(TABLE, filters=filters)
    posts = gateway.list(
        TABLE,
        filters=filters,
        order_by=["-published_at"],
        limit=per_page,
        offset=(page - 1) * per_page,
    )
    return posts, total


def list_blog_posts(*, gateway: Gateway, published: Optional[bool] = None) -> List[Dict[str, Any]]:
    """Owner listing: drafts included, newest first."""
    filters = {"published": published} if published is not None else None
    return gateway.list(TABLE, filters=filters, order_by=["-created_at"])
