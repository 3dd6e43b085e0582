from .fields import assert_email, assert_required


def assert_contact_message(message):
    assert_required(message, "name", "email", "subject", "message")
    assert_email(message["email"])
