# nazarban/config/base.py
from __future__ import annotations
from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]

class BaseConfig(BaseSettings):
    # ===== Core =====
    SITE_TITLE: str = "Nazarban AI"
    SECRET_KEY: str = "change-me"
    ADMIN_PASSWORD: str = ""
    ENV: str = "base"  # overridden in local/server

    # ===== CORS =====
    CORS_ALLOW_ORIGINS: List[str] = []

    # ===== Content files =====
    CONTENT_DIR: Path = BASE_DIR / "data"
    ABOUT_VIDEO_FILE: str = "aboutVideo.json"
    SERVICES_VIDEOS_FILE: str = "servicesVideos.json"

    # Services that can carry an intro video (order matters for the admin form)
    SERVICE_IDS: List[str] = ["strategy", "development", "automation"]

    # ===== Languages =====
    DEFAULT_LANGUAGE: str = "fa"
    LANGUAGE_COOKIE: str = "preferredLanguage"

    # ===== Templates =====
    TEMPLATES_DIR: Path = BASE_DIR / "templates"

    # ===== Admin =====
    SESSION_MAX_AGE: int = 24 * 60 * 60  # admin session lifetime (seconds)
    LOGIN_MAX_ATTEMPTS: int = 5          # failed passwords per client ...
    LOGIN_WINDOW_SECONDS: int = 15 * 60  # ... within this window

    # ===== Logging =====
    LOG_LEVEL: str = "INFO"

    # Pydantic v2
    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        extra="ignore",
    )
