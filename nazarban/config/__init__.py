# nazarban/config/__init__.py
from __future__ import annotations
import logging
import os

logger = logging.getLogger(__name__)

# pick the settings class from ENV (dev is the default)
ENV = os.getenv("ENV", "dev").lower()

if ENV == "prod":
    from .server import Settings
else:
    from .local import Settings

settings = Settings()

# ---- Post-init helpers/warnings ----
settings.CONTENT_DIR.mkdir(parents=True, exist_ok=True)

if not settings.ADMIN_PASSWORD:
    logger.warning("[config] ADMIN_PASSWORD is not set; admin saves are disabled.")
if settings.ENV == "prod" and settings.SECRET_KEY == "change-me":
    logger.warning("[config] SECRET_KEY still has its default value.")
