from datetime import datetime
from typing import Optional


def resolve_published_at(
    *,
    published: bool,
    current: Optional[datetime],
    now: datetime,
) -> Optional[datetime]:
    """
    Publication timestamp after a save.

    Set at the first transition to published and never reset afterwards,
    unpublishing included.
    """
    if current is not None:
        return current
    return now if published else None
