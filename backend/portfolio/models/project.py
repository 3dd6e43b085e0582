from portfolio.extensions import db
from .base import BaseModel


class Project(BaseModel):
    __tablename__ = "projects"

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    short_description = db.Column(db.String(500), nullable=False)
    full_description = db.Column(db.Text, nullable=False)
    technologies = db.Column(db.JSON, nullable=False, default=list)

    project_url = db.Column(db.String(512), nullable=True)
    github_url = db.Column(db.String(512), nullable=True)
    image_url = db.Column(db.String(512), nullable=True)
    preview_image_url = db.Column(db.String(1024), nullable=True)

    featured = db.Column(db.Boolean, default=False)
    order_index = db.Column(db.Integer, default=0, index=True)
