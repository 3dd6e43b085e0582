# portfolio/application/projects.py
from typing import Any, Dict, List, Optional

from portfolio.domain.invariants.exceptions import DuplicateSlug
from portfolio.domain.invariants.fields import as_bool, assert_text, is_blank
from portfolio.domain.invariants.project import assert_project
from portfolio.gateway import ConstraintViolation, Gateway, RecordNotFound
from portfolio.utils.order import next_order_index
from portfolio.utils.preview import preview_image_url
from portfolio.utils.slug import slugify
from .common import (
    assert_slug_available,
    blank_to_none,
    clean_string_list,
    pick_fields,
    require_record,
)

TABLE = "projects"

PROJECT_FIELDS = (
    "title",
    "slug",
    "short_description",
    "full_description",
    "technologies",
    "project_url",
    "github_url",
    "image_url",
    "preview_image_url",
    "featured",
    "order_index",
)

TEXT_FIELDS = (
    "title",
    "slug",
    "short_description",
    "full_description",
    "project_url",
    "github_url",
    "image_url",
    "preview_image_url",
)


def create_project(*, gateway: Gateway, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create a portfolio project.

    Edge cases handled:
    - Empty slug (derived from the title)
    - Duplicate slug (rejected before anything is written)
    - Missing preview image (derived from the live project URL)
    - Missing display position (appended after the last project)
    """
    record = pick_fields(data, PROJECT_FIELDS)
    assert_text(record, *TEXT_FIELDS)
    blank_to_none(record, "project_url", "github_url", "image_url", "preview_image_url")

    if is_blank(record.get("slug")):
        record["slug"] = slugify(record.get("title"))

    record["technologies"] = clean_string_list(record.get("technologies"), "technologies")
    record["featured"] = as_bool(record.get("featured"), "featured")

    if not record.get("preview_image_url"):
        record["preview_image_url"] = preview_image_url(record.get("project_url"))

    assert_project(record)
    assert_slug_available(gateway, TABLE, record["slug"])

    if record.get("order_index") is None:
        record["order_index"] = next_order_index(gateway, TABLE)

    try:
        return gateway.create(TABLE, record)
    except ConstraintViolation as exc:
        # Lost a race with a concurrent insert of the same slug
        raise DuplicateSlug(TABLE, record["slug"]) from exc


def update_project(
    *,
    gateway: Gateway,
    project_id: str,
    data: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Update mutable fields on a project. Last write wins.
    """
    current = require_record(gateway, TABLE, project_id)

    changes = pick_fields(data, PROJECT_FIELDS)
    assert_text(changes, *TEXT_FIELDS)
    blank_to_none(changes, "project_url", "github_url", "image_url", "preview_image_url")

    if "technologies" in changes:
        changes["technologies"] = clean_string_list(changes["technologies"], "technologies")
    if "featured" in changes:
        changes["featured"] = as_bool(changes["featured"], "featured")
    if "slug" in changes and is_blank(changes["slug"]):
        changes["slug"] = slugify(changes.get("title", current["title"]))

    # A preview derived from the old URL follows the new one
    if "project_url" in changes and "preview_image_url" not in changes:
        derived_before = preview_image_url(current.get("project_url"))
        if not current.get("preview_image_url") or current["preview_image_url"] == derived_before:
            changes["preview_image_url"] = preview_image_url(changes["project_url"])

    merged = {**current, **changes}
    assert_project(merged)

    if merged["slug"] != current["slug"]:
        assert_slug_available(gateway, TABLE, merged["slug"], exclude_id=project_id)

    try:
        return gateway.update(TABLE, project_id, changes)
    except ConstraintViolation as exc:
        raise DuplicateSlug(TABLE, merged["slug"]) from exc


def delete_project(*, gateway: Gateway, project_id: str) -> None:
    require_record(gateway, TABLE, project_id)
    gateway.delete(TABLE, project_id)


def get_project(*, gateway: Gateway, project_id: str) -> Dict[str, Any]:
    return require_record(gateway, TABLE, project_id)


def get_project_by_slug(*, gateway: Gateway, slug: str) -> Dict[str, Any]:
    project = gateway.get(TABLE, slug=slug)
    if project is None:
        raise RecordNotFound(f"Project '{slug}' not found")
    return project


def list_projects(
    *,
    gateway: Gateway,
    featured: Optional[bool] = None,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Projects in display order (order_index, then insertion order)."""
    filters = {"featured": True} if featured else None
    return gateway.list(TABLE, filters=filters, order_by=["order_index"], limit=limit)
