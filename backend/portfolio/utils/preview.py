import re
from urllib.parse import quote

SNAPSHOT_URL = "https://api.pagexray.io/v1/snapshot"
_SCHEME = re.compile(r"^https?://", re.IGNORECASE)


def preview_image_url(project_url, *, width=1280, height=800):
    """
    Screenshot URL for a live project, or None when there is no project URL.
    """
    if not project_url:
        return None

    clean_url = _SCHEME.sub("", project_url.strip())
    return (
        f"{SNAPSHOT_URL}?url={quote(clean_url, safe='')}"
        f"&width={width}&height={height}&device=desktop&scale=1&format=jpeg"
    )
