# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
import logging

logger = logging.getLogger(__name__)

# ✅ Only load .env in local/dev
if os.environ.get("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()


def _clean_key(raw: str) -> str:
    # Strips accidental spaces or quotes copied into .env
    return (raw or "").strip().strip('"').strip("'").strip()


def _as_bool(raw: str, default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./mindpulse.db")

API_KEY = _clean_key(os.getenv("API_KEY", ""))
AI_BASE_URL = os.getenv("AI_BASE_URL", "https://api.openai.com/v1").rstrip("/")
AI_MODEL = os.getenv("AI_MODEL", "gpt-4o")
AI_TIMEOUT = float(os.getenv("AI_TIMEOUT", "30"))

PORT = int(os.getenv("PORT", "3001"))

AI_RATE_LIMIT = os.getenv("AI_RATE_LIMIT", "30/minute")
RATE_LIMIT_ENABLED = _as_bool(os.getenv("RATE_LIMIT_ENABLED"), True)

VIBE_RETENTION_DAYS = int(os.getenv("VIBE_RETENTION_DAYS", "30"))
SCHEDULER_TIMEZONE = os.getenv("SCHEDULER_TIMEZONE", "UTC")

DEFAULT_PASSWORD = "password123"
AVATAR_URL_TEMPLATE = "https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"


def has_api_key(key: str = None) -> bool:
    key = API_KEY if key is None else key
    return bool(key) and len(key) >= 10


def masked_api_key(key: str = None) -> str:
    key = API_KEY if key is None else key
    return f"{key[:8]}...****"
