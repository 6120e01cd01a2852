from urllib.parse import urlsplit
from flask import current_app, jsonify, redirect, render_template, request, url_for
from habitare.services.admin_session import AdminSession
from . import admin_bp

DEFAULT_REDIRECT = "/admin"


def safe_redirect_target(target):
    """Only local paths are honoured; anything else lands on the dashboard."""
    if not target:
        return DEFAULT_REDIRECT
    parts = urlsplit(target)
    if parts.scheme or parts.netloc or not target.startswith("/") or target.startswith("//"):
        return DEFAULT_REDIRECT
    return target


@admin_bp.route("/login", methods=["GET"])
def login():
    target = safe_redirect_target(request.args.get("redirect"))

    if AdminSession().is_authenticated:
        return redirect(target)

    return render_template(
        "admin/login.html",
        page_title="Login - Admin Habitare",
        meta_description="Acesso administrativo",
        redirect_to=target,
        error=request.args.get("error"),
    )


@admin_bp.route("/login", methods=["POST"])
def login_submit():
    username = request.form.get("username", "")
    password = request.form.get("password", "")
    target = safe_redirect_target(request.form.get("redirect"))

    if AdminSession().login(username, password):
        current_app.logger.info("Admin login from %s", request.remote_addr)
        return redirect(target)

    current_app.logger.warning("Failed admin login from %s", request.remote_addr)
    return redirect(url_for("admin.login", error="credenciais-invalidas", redirect=target))


@admin_bp.route("/check-auth", methods=["GET"])
def check_auth():
    return jsonify({"authenticated": AdminSession().is_authenticated})


@admin_bp.route("/logout", methods=["POST"])
def logout():
    AdminSession().logout()
    return redirect(url_for("admin.login"))
