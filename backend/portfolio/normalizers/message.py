from .timestamps import iso


def normalize_message(message):
    return {
        "id": message["id"],
        "name": message.get("name"),
        "email": message.get("email"),
        "phone": message.get("phone"),
        "subject": message.get("subject"),
        "message": message.get("message"),
        "is_read": bool(message.get("is_read")),
        "is_archived": bool(message.get("is_archived")),
        "created_at": iso(message.get("created_at")),
    }
