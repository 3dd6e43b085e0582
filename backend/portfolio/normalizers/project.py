from .timestamps import iso


def normalize_project(project, admin=False):
    data = {
        "id": project["id"],
        "title": project["title"],
        "slug": project["slug"],
        "short_description": project.get("short_description"),
        "full_description": project.get("full_description"),
        "technologies": project.get("technologies") or [],
        "project_url": project.get("project_url"),
        "github_url": project.get("github_url"),
        "image_url": project.get("image_url"),
        "preview_image_url": project.get("preview_image_url"),
        "featured": bool(project.get("featured")),
        "order_index": project.get("order_index"),
    }

    if admin:
        data["created_at"] = iso(project.get("created_at"))
        data["updated_at"] = iso(project.get("updated_at"))

    return data
