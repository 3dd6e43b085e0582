from datetime import datetime, timezone


def iso(value):
    """UTC ISO-8601 string; naive datetimes are taken to be UTC already."""
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    return str(value)
