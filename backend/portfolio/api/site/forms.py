# portfolio/api/site/forms.py
from flask import current_app, jsonify, request

from portfolio.application.contact import submit_contact_message
from portfolio.application.donations import submit_donation
from portfolio.application.purchases import submit_service_purchase
from portfolio.application.settings import get_settings
from portfolio.gateway import get_gateway
from portfolio.utils.decorators import page_view
from . import site_bp


def form_data():
    return request.get_json(silent=True) or request.form.to_dict()


@site_bp.route("/contact", methods=["GET"])
@page_view
def contact():
    settings = get_settings(gateway=get_gateway())
    return jsonify({
        "contact_email": settings["contact_email"],
        "social_links": settings["social_links"],
    }), 200


@site_bp.route("/contact", methods=["POST"])
def submit_contact():
    message = submit_contact_message(gateway=get_gateway(), data=form_data())
    current_app.logger.info("Contact message %s received", message["id"])

    return jsonify({
        "id": message["id"],
        "message": "Thank you for your message. We'll get back to you soon."
    }), 201


@site_bp.route("/donate", methods=["POST"])
def donate():
    donation = submit_donation(gateway=get_gateway(), data=form_data())
    current_app.logger.info("Donation %s recorded", donation["id"])

    return jsonify({
        "id": donation["id"],
        "status": donation["status"],
        "message": "Thank you for your donation! Your support is greatly appreciated."
    }), 201


@site_bp.route("/services/<service_id>/purchase", methods=["POST"])
def purchase_service(service_id):
    purchase = submit_service_purchase(
        gateway=get_gateway(),
        service_id=service_id,
        data=form_data(),
    )

    if purchase["purchase_type"] == "purchase":
        text = "Your purchase request has been submitted. We'll contact you soon!"
    else:
        text = "Your inquiry has been submitted. We'll get back to you shortly!"

    return jsonify({
        "id": purchase["id"],
        "amount": purchase["amount"],
        "currency": purchase["currency"],
        "status": purchase["status"],
        "message": text
    }), 201
