import hmac
from functools import wraps
from flask import current_app, jsonify, redirect, request, url_for
from habitare.services.admin_session import AdminSession


def login_required(fn):
    """Send anonymous visitors to the login page, remembering where they were."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not AdminSession().is_authenticated:
            return redirect(url_for("admin.login", redirect=request.full_path.rstrip("?")))
        return fn(*args, **kwargs)
    return wrapper


def extract_api_key():
    """The key may travel as a header, a query parameter or a body field."""
    key = request.headers.get("X-API-Key") or request.args.get("api_key")
    if key:
        return key

    if request.is_json:
        payload = request.get_json(silent=True)
        if isinstance(payload, dict):
            return payload.get("api_key")
        return None

    return request.form.get("api_key")


def api_key_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        rejection = check_api_key()
        if rejection is not None:
            return rejection
        return fn(*args, **kwargs)
    return wrapper


def check_api_key():
    """Returns a 401 response when the key is wrong, None when it matches."""
    expected = current_app.config["API_KEY"]
    supplied = extract_api_key()

    if not supplied or not hmac.compare_digest(str(supplied).encode(), expected.encode()):
        current_app.logger.warning(
            "Rejected API request to %s from %s", request.path, request.remote_addr
        )
        return jsonify({
            "error": "Não autorizado",
            "message": "API key inválida ou ausente. Use o header X-API-Key ou o parâmetro api_key.",
        }), 401

    return None
