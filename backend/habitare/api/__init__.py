from flask import Blueprint, request
from habitare.utils.decorators import check_api_key

api_bp = Blueprint("api", __name__)

PUBLIC_ENDPOINTS = {"api.documentation"}


@api_bp.before_request
def require_api_key():
    if request.endpoint in PUBLIC_ENDPOINTS:
        return None
    return check_api_key()


# Import route modules so they register with api_bp
from . import docs
from . import articles
