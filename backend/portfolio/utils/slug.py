import re

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(text):
    """``"Hello, World!"`` -> ``"hello-world"``"""
    return _NON_SLUG_CHARS.sub("-", (text or "").lower()).strip("-")


def is_valid_slug(slug):
    return isinstance(slug, str) and SLUG_PATTERN.match(slug) is not None
