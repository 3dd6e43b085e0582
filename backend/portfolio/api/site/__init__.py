from flask import Blueprint

# Public site: pages, forms, sign-in and media
site_bp = Blueprint("site", __name__)

# Import route modules so they register with site_bp
from . import health
from . import pages
from . import forms
from . import auth
from . import media
