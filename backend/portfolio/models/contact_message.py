from portfolio.extensions import db
from .base import BaseModel


class ContactMessage(BaseModel):
    __tablename__ = "contact_messages"

    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(200), nullable=False)
    phone = db.Column(db.String(50), nullable=True)
    subject = db.Column(db.String(300), nullable=False)
    message = db.Column(db.Text, nullable=False)

    is_read = db.Column(db.Boolean, default=False, index=True)
    is_archived = db.Column(db.Boolean, default=False, index=True)
