import logging
import os
from flask import Flask, send_file, current_app
from flask_swagger_ui import get_swaggerui_blueprint
from .config import config_by_name
from .extensions import db, migrate
from .errors import register_error_handlers
from .templating import register_template_helpers
from .cli import register_commands


def create_app(config_name: str | None = None, overrides: dict | None = None) -> Flask:
    app = Flask(__name__)
    config_name = config_name or os.getenv("FLASK_CONFIG", "development")
    app.config.from_object(config_by_name[config_name])
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO))
    os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)

    # -------------------------------------------------
    # Templates
    # -------------------------------------------------
    register_template_helpers(app)

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    from .site import site_bp
    from .admin import admin_bp
    from .api import api_bp

    app.register_blueprint(site_bp)
    app.register_blueprint(admin_bp, url_prefix="/admin")
    app.register_blueprint(api_bp, url_prefix="/api")
    register_error_handlers(app)
    register_commands(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC, NO API KEY)
    # -------------------------------------------------
    @app.route("/openapi/api.yaml", methods=["GET"], endpoint="openapi_api")
    def serve_openapi():
        spec_path = os.path.join(current_app.root_path, "api", "openapi.yaml")

        if not os.path.exists(spec_path):
            raise FileNotFoundError("openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/api.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "API Revista Habitare",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    app.logger.info("Revista Habitare ready (%s config)", config_name)
    return app
