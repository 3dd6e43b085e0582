from .timestamps import iso


def normalize_service(service, admin=False):
    data = {
        "id": service["id"],
        "title": service["title"],
        "description": service.get("description"),
        "short_description": service.get("short_description"),
        "category": service.get("category"),
        "pricing_type": service.get("pricing_type"),
        "price": service.get("price"),
        "currency": service.get("currency"),
        "image_url": service.get("image_url"),
        "video_url": service.get("video_url"),
        "features": service.get("features") or [],
        "featured": bool(service.get("featured")),
        "order_index": service.get("order_index"),
    }

    if admin:
        data["is_active"] = bool(service.get("is_active"))
        data["created_at"] = iso(service.get("created_at"))
        data["updated_at"] = iso(service.get("updated_at"))

    return data


def normalize_purchase(purchase):
    service = purchase.get("service")
    return {
        "id": purchase["id"],
        "service_id": purchase.get("service_id"),
        "service": (
            {"id": service["id"], "title": service["title"]} if service else None
        ),
        "client_name": purchase.get("client_name"),
        "client_email": purchase.get("client_email"),
        "client_phone": purchase.get("client_phone"),
        "message": purchase.get("message"),
        "purchase_type": purchase.get("purchase_type"),
        "amount": purchase.get("amount"),
        "currency": purchase.get("currency"),
        "status": purchase.get("status"),
        "created_at": iso(purchase.get("created_at")),
        "updated_at": iso(purchase.get("updated_at")),
    }
