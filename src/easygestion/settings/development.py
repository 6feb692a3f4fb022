import os

from .base import *  # noqa: F401,F403
from .base import _flag

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Create tables on startup unless told otherwise
AUTO_INIT_DB = _flag("AUTO_INIT_DB", "1")
AUTO_SEED_DB = _flag("AUTO_SEED_DB", "0")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS", "http://localhost:5173").split(",") if o.strip()]
