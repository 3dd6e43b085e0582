from datetime import datetime, timezone
import uuid
from portfolio.extensions import db


def utcnow():
    return datetime.now(timezone.utc)


class BaseModel(db.Model):
    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, index=True)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, index=True)

    def __init__(self, **kwargs):
        """
        Dummy __init__ to satisfy static type checkers (Pylance, MyPy).
        SQLAlchemy ORM will populate fields dynamically.
        """
        super().__init__(**kwargs)

    @classmethod
    def column_names(cls):
        return [column.name for column in cls.__table__.columns]

    def to_dict(self):
        """Plain-record copy of the row, as handed out by the gateway."""
        return {name: getattr(self, name) for name in self.column_names()}
