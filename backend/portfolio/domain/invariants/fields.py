import re
from urllib.parse import urlparse

from portfolio.utils.slug import is_valid_slug
from .exceptions import InvariantViolation

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

TRUE_STRINGS = {"true", "1", "yes", "on"}
FALSE_STRINGS = {"false", "0", "no", "off", ""}


def is_blank(value):
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return not value
    return False


def assert_required(record, *fields):
    missing = [field for field in fields if is_blank(record.get(field))]
    if missing:
        raise InvariantViolation(f"Missing required fields: {', '.join(missing)}")


def assert_text(record, *fields):
    """Fields that are present must hold strings."""
    wrong = [
        field for field in fields
        if record.get(field) is not None and not isinstance(record[field], str)
    ]
    if wrong:
        raise InvariantViolation(f"Fields must be text: {', '.join(wrong)}")


def as_bool(value, field):
    """
    Accept JSON booleans and the usual form spellings (``"true"``, ``"off"``,
    ``"1"`` ...). ``None`` reads as False.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    raise InvariantViolation(f"{field} must be true or false.")


def assert_choice(value, allowed, field):
    if not isinstance(value, str) or value not in allowed:
        raise InvariantViolation(
            f"Invalid {field} '{value}'. Expected one of: {', '.join(sorted(allowed))}"
        )


def assert_slug(slug):
    if not is_valid_slug(slug):
        raise InvariantViolation(
            f"Slug '{slug}' must contain only lowercase letters, digits and single hyphens."
        )


def assert_email(value, field="email"):
    if not isinstance(value, str) or not EMAIL_PATTERN.match(value):
        raise InvariantViolation(f"Invalid {field}: '{value}'")


def assert_http_url(value, field):
    """Empty values pass; anything else must be an absolute http(s) URL."""
    if is_blank(value):
        return
    if not isinstance(value, str):
        raise InvariantViolation(f"{field} must be a valid http(s) URL.")
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvariantViolation(f"{field} must be a valid http(s) URL.")


def as_positive_amount(value, field):
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise InvariantViolation(f"{field} must be a number.") from None

    if amount != amount or amount <= 0:
        raise InvariantViolation(f"{field} must be greater than zero.")
    return amount
