from portfolio.extensions import db
from .base import BaseModel


class ServicePurchase(BaseModel):
    __tablename__ = "service_purchases"

    service_id = db.Column(
        db.String(36),
        db.ForeignKey("services.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    client_name = db.Column(db.String(200), nullable=False)
    client_email = db.Column(db.String(200), nullable=False)
    client_phone = db.Column(db.String(50), nullable=True)
    message = db.Column(db.Text, nullable=True)

    purchase_type = db.Column(db.String(20), nullable=False)  # purchase | inquiry
    # Snapshot of the service price at submit time
    amount = db.Column(db.Float, nullable=True)
    currency = db.Column(db.String(3), nullable=True)

    status = db.Column(db.String(20), default="pending", index=True)
