from .exceptions import InvariantViolation
from .fields import as_positive_amount, assert_choice, assert_required

PRICING_TYPES = {"fixed", "inquiry"}


def assert_service(service):
    """
    Validate a service record. Returns the price as it must be stored:
    a positive float for fixed pricing, None for inquiry-only services.
    """
    assert_required(service, "title", "description", "pricing_type")
    assert_choice(service["pricing_type"], PRICING_TYPES, "pricing_type")

    if service["pricing_type"] == "inquiry":
        return None

    if service.get("price") in (None, ""):
        raise InvariantViolation("Price is required for fixed-price services.")
    return as_positive_amount(service["price"], "price")
