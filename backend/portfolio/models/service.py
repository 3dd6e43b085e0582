from portfolio.extensions import db
from .base import BaseModel


class Service(BaseModel):
    __tablename__ = "services"

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    short_description = db.Column(db.String(500), nullable=True)
    category = db.Column(db.String(100), nullable=True)

    pricing_type = db.Column(db.String(20), nullable=False, default="fixed")  # fixed | inquiry
    price = db.Column(db.Float, nullable=True)
    currency = db.Column(db.String(3), default="USD")

    image_url = db.Column(db.String(512), nullable=True)
    video_url = db.Column(db.String(512), nullable=True)
    features = db.Column(db.JSON, default=list)

    featured = db.Column(db.Boolean, default=False)
    is_active = db.Column(db.Boolean, default=True, index=True)
    order_index = db.Column(db.Integer, default=0, index=True)

    # Deleting a service clears service_id on its purchases
    purchases = db.relationship("ServicePurchase", backref="service", lazy="select")
