# -*- coding: utf-8 -*-
"""
Application configuration.

Values come from environment variables, optionally loaded from a .env file
in the project root. Routes lists the pages MainWindow can show.
"""

from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "15"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# UI Settings
_LANGUAGE = os.getenv("APP_LANGUAGE", "en")
_SIGNUP_REDIRECT_DELAY_MS = int(os.getenv("SIGNUP_REDIRECT_DELAY_MS", "2000"))

# Logging
_LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "StartupFlo"
    APP_TITLE: str = "StartupFlo - Business Operations Suite"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "StartupFlo"

    # HTTP API Backend Settings
    # Reads from .env (API_BASE_URL, API_TIMEOUT, API_VERIFY_SSL)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL

    # Language of the translation table ("en")
    LANGUAGE: str = _LANGUAGE

    # Signup wizard
    SIGNUP_REDIRECT_DELAY_MS: int = _SIGNUP_REDIRECT_DELAY_MS
    PASSWORD_MIN_LENGTH: int = 8

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Logging
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # Typography
    FONT_FAMILY: str = "Segoe UI"
    FONT_SIZE: int = 10

    # Window
    WINDOW_MIN_WIDTH: int = 720
    WINDOW_MIN_HEIGHT: int = 760

    # Colors
    PRIMARY_COLOR: str = "#2563EB"
    PRIMARY_DARK: str = "#1D4ED8"
    TEXT_COLOR: str = "#111827"
    TEXT_LIGHT: str = "#6B7280"
    BACKGROUND_COLOR: str = "#F8FAFC"
    CARD_BACKGROUND: str = "#FFFFFF"
    BORDER_COLOR: str = "#E5E7EB"
    SUCCESS_COLOR: str = "#16A34A"
    ERROR_COLOR: str = "#DC2626"
    ERROR_BACKGROUND: str = "#FEF2F2"
    PENDING_COLOR: str = "#9CA3AF"


class Routes:
    HOME = "/"
    SIGNUP = "/signup"
