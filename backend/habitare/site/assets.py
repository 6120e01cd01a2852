import os
from flask import current_app, send_from_directory
from . import site_bp


@site_bp.route("/manifest.json", methods=["GET"])
def manifest():
    return send_from_directory(
        current_app.static_folder, "manifest.json", mimetype="application/manifest+json"
    )


@site_bp.route("/sw.js", methods=["GET"])
def service_worker():
    response = send_from_directory(
        current_app.static_folder, "sw.js", mimetype="application/javascript"
    )
    response.headers["Service-Worker-Allowed"] = "/"
    response.headers["Cache-Control"] = "no-cache"
    return response


@site_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(os.path.abspath(current_app.config["UPLOAD_FOLDER"]), filename)
