from .base import BaseModel
from .project import Project
from .blog_post import BlogPost
from .service import Service
from .service_purchase import ServicePurchase
from .contact_message import ContactMessage
from .donation import Donation
from .page_view import PageView
from .setting import Setting
from .user import User
from .audit_log import AuditLog

__all__ = [
    "BaseModel",
    "Project",
    "BlogPost",
    "Service",
    "ServicePurchase",
    "ContactMessage",
    "Donation",
    "PageView",
    "Setting",
    "User",
    "AuditLog",
]
