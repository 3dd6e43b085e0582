from portfolio.extensions import db
from .base import BaseModel


class BlogPost(BaseModel):
    __tablename__ = "blog_posts"

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    subheading = db.Column(db.String(300), nullable=True)
    excerpt = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    author = db.Column(db.String(120), nullable=False)
    category = db.Column(db.String(100), nullable=False, index=True)
    tags = db.Column(db.JSON, default=list)
    image_url = db.Column(db.String(512), nullable=True)

    published = db.Column(db.Boolean, default=False, index=True)
    featured = db.Column(db.Boolean, default=False)
    # Set once, on the first publish
    published_at = db.Column(db.DateTime(timezone=True), nullable=True, index=True)
