# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

from datetime import datetime, timezone, date, timedelta


def utc_now() -> datetime:
    """Naive UTC timestamp, matching what the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_today() -> date:
    return utc_now().date()


def today_str() -> str:
    # YYYY-MM-DD, the key used for the one-per-day limits
    return utc_today().isoformat()


def days_ago_str(days: int) -> str:
    return (utc_today() - timedelta(days=days)).isoformat()
