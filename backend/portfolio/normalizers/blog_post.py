from .timestamps import iso


def normalize_blog_post(post, admin=False, summary=False):
    """
    ``summary`` drops the body for list views; ``admin`` adds the
    publication flag and bookkeeping timestamps.
    """
    data = {
        "id": post["id"],
        "title": post["title"],
        "slug": post["slug"],
        "subheading": post.get("subheading"),
        "excerpt": post.get("excerpt"),
        "author": post.get("author"),
        "category": post.get("category"),
        "tags": post.get("tags") or [],
        "image_url": post.get("image_url"),
        "featured": bool(post.get("featured")),
        "published_at": iso(post.get("published_at")),
    }

    if not summary:
        data["content"] = post.get("content")

    if admin:
        data["published"] = bool(post.get("published"))
        data["created_at"] = iso(post.get("created_at"))
        data["updated_at"] = iso(post.get("updated_at"))

    return data
