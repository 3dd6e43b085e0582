from portfolio.extensions import db
from .base import BaseModel


class Setting(BaseModel):
    __tablename__ = "settings"

    value = db.Column(db.JSON, nullable=False, default=dict)
