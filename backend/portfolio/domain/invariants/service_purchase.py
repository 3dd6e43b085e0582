from .exceptions import InvariantViolation
from .fields import assert_choice, assert_email, assert_required, is_blank

PURCHASE_TYPES = {"purchase", "inquiry"}
PURCHASE_STATUSES = {"pending", "confirmed", "completed", "cancelled"}


def assert_service_purchase(purchase):
    assert_required(purchase, "client_name", "client_email", "purchase_type")
    assert_choice(purchase["purchase_type"], PURCHASE_TYPES, "purchase_type")
    assert_email(purchase["client_email"], "client_email")

    if purchase["purchase_type"] == "inquiry" and is_blank(purchase.get("client_phone")):
        raise InvariantViolation("Phone number is required for service inquiries.")


def assert_purchase_status(status):
    assert_choice(status, PURCHASE_STATUSES, "status")
