import os

from .base import *  # noqa: F401,F403

SECRET_KEY = "test-secret"
JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite://")
SQLALCHEMY_ENGINE_OPTIONS = {}

AUTO_INIT_DB = True
AUTO_SEED_DB = False

WTF_CSRF_ENABLED = False

# Cheap scrypt cost so the suite stays fast
PASSWORD_HASH_METHOD = "scrypt:1024:8:1"

UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(os.getcwd(), ".test-uploads"))
FRONTEND_DIST = os.getenv("FRONTEND_DIST", os.path.join(os.getcwd(), ".test-dist"))
