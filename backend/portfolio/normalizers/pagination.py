# portfolio/normalizers/pagination.py
import math
from typing import Any, Callable, Dict, Iterable, Optional


def page_meta(page: int, per_page: int, total: Optional[int] = None) -> Dict[str, Any]:
    meta: Dict[str, Any] = {"page": page, "per_page": per_page}
    if total is not None:
        meta["total"] = total
        meta["total_pages"] = math.ceil(total / per_page) if per_page else 0
    return meta


def normalize_pagination(
    items: Iterable[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
    total: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Wrap a list response as ``{"items": [...]}``.

    Public listings that page through results also carry a ``pagination``
    block; dashboard listings return everything at once.
    """
    response: Dict[str, Any] = {"items": [normalize_fn(item) for item in items]}

    if page is not None and per_page is not None:
        response["pagination"] = page_meta(page, per_page, total)

    return response
