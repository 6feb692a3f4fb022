"""Settings shared by every environment.

Environment modules star-import this one and override what differs.
"""
import os
import urllib.parse
from datetime import timedelta


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _database_uri() -> str:
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit

    user = os.getenv("DB_USER", "root")
    password = urllib.parse.quote_plus(os.getenv("DB_PASSWORD", ""))
    host = os.getenv("DB_HOST", "localhost")
    port = int(os.getenv("DB_PORT", "3306"))
    name = os.getenv("DB_NAME", "easygestion")
    return f"mysql+mysqlconnector://{user}:{password}@{host}:{port}/{name}"


SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
DEBUG = False
TESTING = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SQLALCHEMY_DATABASE_URI = _database_uri()
SQLALCHEMY_TRACK_MODIFICATIONS = False
SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

AUTO_INIT_DB = _flag("AUTO_INIT_DB")
AUTO_SEED_DB = _flag("AUTO_SEED_DB")

SUPERADMIN_USERNAME = os.getenv("SUPERADMIN_USERNAME", "superadmin")
SUPERADMIN_EMAIL = os.getenv("SUPERADMIN_EMAIL", "admin@easygestion.local")
SUPERADMIN_PASSWORD = os.getenv("SUPERADMIN_PASSWORD", "")

# Access tokens
JWT_SECRET_KEY = os.getenv("ACCESS_TOKEN_SECRET", SECRET_KEY)
JWT_ALGORITHM = os.getenv("ACCESS_TOKEN_ALGORITHM", "HS256")
JWT_DECODE_ALGORITHMS = [JWT_ALGORITHM]
JWT_ACCESS_TOKEN_EXPIRES = timedelta(milliseconds=int(os.getenv("ACCESS_TOKEN_EXPIRES_IN_MS", str(60 * 60 * 1000))))
JWT_ENCODE_AUDIENCE = os.getenv("ACCESS_TOKEN_AUDIENCE", "my_backend_api")
JWT_DECODE_AUDIENCE = JWT_ENCODE_AUDIENCE
JWT_ENCODE_ISSUER = os.getenv("ACCESS_TOKEN_ISSUER", "my_authentication_server")
JWT_DECODE_ISSUER = JWT_ENCODE_ISSUER
JWT_TOKEN_LOCATION = ["headers", "cookies"]
JWT_ACCESS_COOKIE_NAME = "accessToken"
JWT_COOKIE_SECURE = _flag("SECURE")
JWT_COOKIE_SAMESITE = "Lax"
JWT_COOKIE_CSRF_PROTECT = False
JWT_SESSION_COOKIE = False

WTF_CSRF_ENABLED = True
WTF_CSRF_TIME_LIMIT = 3600

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS", "").split(",") if o.strip()]

PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt:131072:8:1")
PASSWORD_MIN_LENGTH = 14

UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(os.getcwd(), "uploads"))
MAX_UPLOAD_FILE_SIZE = 5 * 1024 * 1024
MAX_CONTENT_LENGTH = 25 * 1024 * 1024

FRONTEND_DIST = os.getenv("FRONTEND_DIST", os.path.join(os.getcwd(), "dist", "public"))
