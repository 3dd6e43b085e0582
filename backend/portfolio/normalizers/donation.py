from .timestamps import iso


def normalize_donation(donation):
    return {
        "id": donation["id"],
        "name": donation.get("name"),
        "email": donation.get("email"),
        "amount": donation.get("amount"),
        "currency": donation.get("currency"),
        "message": donation.get("message"),
        "payment_method": donation.get("payment_method"),
        "status": donation.get("status"),
        "created_at": iso(donation.get("created_at")),
        "updated_at": iso(donation.get("updated_at")),
    }
