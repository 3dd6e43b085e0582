from portfolio.extensions import db
from .base import BaseModel


class Donation(BaseModel):
    __tablename__ = "donations"

    name = db.Column(db.String(200), nullable=True)
    email = db.Column(db.String(200), nullable=True)
    amount = db.Column(db.Float, nullable=False)
    currency = db.Column(db.String(3), nullable=False, default="USD")
    message = db.Column(db.Text, nullable=True)
    payment_method = db.Column(db.String(50), nullable=True)

    status = db.Column(db.String(20), nullable=False, default="pending", index=True)
