from .exceptions import InvariantViolation
from .fields import assert_http_url, assert_required, assert_slug


def assert_project(project):
    assert_required(project, "title", "slug", "short_description", "full_description")
    assert_slug(project["slug"])

    technologies = project.get("technologies") or []
    if not technologies:
        raise InvariantViolation("At least one technology is required.")

    assert_http_url(project.get("project_url"), "project_url")
    assert_http_url(project.get("github_url"), "github_url")

    order_index = project.get("order_index")
    if order_index is not None and (isinstance(order_index, bool) or not isinstance(order_index, int)):
        raise InvariantViolation("order_index must be an integer.")
