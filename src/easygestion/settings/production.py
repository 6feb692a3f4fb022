import os

from .base import *  # noqa: F401,F403

SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    raise RuntimeError("SECRET_KEY must be set when APP_ENV=production")
JWT_SECRET_KEY = os.getenv("ACCESS_TOKEN_SECRET", SECRET_KEY)

DEBUG = False
JWT_COOKIE_SECURE = True
