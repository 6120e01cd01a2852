from flask import Blueprint

admin_bp = Blueprint("admin", __name__)

# Import route modules so they register with admin_bp
from . import auth
from . import articles
from . import pins
