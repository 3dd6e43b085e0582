from .fields import as_positive_amount, assert_choice, assert_email, assert_required

DONATION_CURRENCIES = {"USD", "TZS"}
DONATION_STATUSES = {"pending", "completed", "failed"}


def assert_donation(donation):
    """Validate a public donation; returns the amount as a float."""
    assert_required(donation, "name", "email", "amount", "currency")
    assert_email(donation["email"])
    assert_choice(donation["currency"], DONATION_CURRENCIES, "currency")
    return as_positive_amount(donation["amount"], "amount")


def assert_donation_status(status):
    assert_choice(status, DONATION_STATUSES, "status")
