import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY") or os.getenv(
        "SESSION_SECRET", "habitare-secret-key-change-in-production"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Admin session cookie
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_SECURE = False
    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)

    # Shared credentials
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "habitare2024")
    API_KEY = os.getenv("API_KEY", "habitare-api-key-2024")

    # Uploads
    UPLOAD_FOLDER = os.getenv(
        "UPLOAD_FOLDER", os.path.join(BASE_DIR, "..", "data", "uploads")
    )
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024
    DEFAULT_HERO_IMAGE = os.getenv(
        "DEFAULT_HERO_IMAGE",
        "https://images.unsplash.com/photo-1493666438817-866a91353ca9"
        "?auto=format&fit=crop&w=1600&q=80",
    )

    # Tracking defaults for product pins
    SHOP_BASE_URL = os.getenv("SHOP_BASE_URL", "https://loja.habitare.com/produtos")
    TRACKING_SOURCE = os.getenv("TRACKING_SOURCE", "revista-habitare")

    # Public site
    BRAND_NAME = "Revista Habitare"
    BRAND_TAGLINE = (
        "Arquitetura, design e ativações para marcas que pensam como publishers."
    )
    INSTAGRAM_URL = os.getenv("INSTAGRAM_URL", "https://www.instagram.com")
    MARKETPLACE_URL = os.getenv("MARKETPLACE_URL", "/em-desenvolvimento")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DEV_DATABASE_URI",
        "sqlite:///" + os.path.abspath(os.path.join(BASE_DIR, "..", "data", "habitare.db")),
    )


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SECRET_KEY = "testing-secret"
    ADMIN_USERNAME = "admin"
    ADMIN_PASSWORD = "habitare2024"
    API_KEY = "test-api-key"


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
