from .fields import assert_required, assert_slug


def assert_blog_post(post):
    assert_required(post, "title", "slug", "excerpt", "content", "author", "category")
    assert_slug(post["slug"])
