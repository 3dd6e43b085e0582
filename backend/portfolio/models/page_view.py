from portfolio.extensions import db
from .base import BaseModel
from sqlalchemy import event


class PageView(BaseModel):
    __tablename__ = "page_views"

    page_path = db.Column(db.String(512), nullable=False, index=True)
    device_type = db.Column(db.String(20), nullable=True)
    referrer = db.Column(db.String(1024), nullable=True)
    user_agent = db.Column(db.String(1024), nullable=True)
    ip_address = db.Column(db.String(64), nullable=True)
    country = db.Column(db.String(64), nullable=True)


@event.listens_for(PageView, "before_update")
def prevent_page_view_mutation(mapper, connection, target):
    raise RuntimeError("Page views are insert-only")
