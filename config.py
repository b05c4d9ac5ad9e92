"""Centralized configuration read from the environment.

This module is the single source of truth for configuration used across the
application. Import constants from here rather than calling os.getenv directly
in multiple places.
"""

from __future__ import annotations

import os
from typing import Final

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()


# --- MongoDB ---
MONGODB_URI: Final[str] = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DATABASE: Final[str] = os.getenv("MONGODB_DATABASE", "fuel_log")

# --- Ownership ---
# Authentication lives in front of this service; the caller identifies the
# owner with this header and requests without it fall back to the default.
USER_ID_HEADER: Final[str] = "X-User-Id"
DEFAULT_USER_ID: Final[str] = os.getenv("DEFAULT_USER_ID", "local")

# --- HTTP ---
CORS_ALLOWED_ORIGINS: Final[list[str]] = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
    if origin.strip()
]

# --- Logging ---
LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


__all__ = [
    "CORS_ALLOWED_ORIGINS",
    "DEFAULT_USER_ID",
    "LOG_LEVEL",
    "MONGODB_DATABASE",
    "MONGODB_URI",
    "USER_ID_HEADER",
]
