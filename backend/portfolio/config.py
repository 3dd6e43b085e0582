import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(
        minutes=int(os.getenv("JWT_ACCESS_TOKEN_MINUTES", "60"))
    )

    # Object storage
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "uploads")
    PUBLIC_MEDIA_URL = os.getenv("PUBLIC_MEDIA_URL", "/uploads")
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024

    # Integrations
    CONTACT_WEBHOOK_URL = os.getenv("CONTACT_WEBHOOK_URL")
    WEBHOOK_TIMEOUT = float(os.getenv("WEBHOOK_TIMEOUT", "5"))
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GEMINI_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", "60"))

    SITE_AUTHOR = os.getenv("SITE_AUTHOR", "Site Owner")
    AUTH_SIGNUP_FALLBACK = _env_flag("AUTH_SIGNUP_FALLBACK", False)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///portfolio.db")
    AUTH_SIGNUP_FALLBACK = _env_flag("AUTH_SIGNUP_FALLBACK", True)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    CONTACT_WEBHOOK_URL = None
    GEMINI_API_KEY = None
    SITE_AUTHOR = "Test Author"
    AUTH_SIGNUP_FALLBACK = False


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}
