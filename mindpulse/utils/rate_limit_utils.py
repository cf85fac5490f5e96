# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

from slowapi import Limiter
from slowapi.util import get_remote_address

from mindpulse.config import RATE_LIMIT_ENABLED, AI_RATE_LIMIT

# Per-IP limit, only applied to the AI routes
limiter = Limiter(key_func=get_remote_address, enabled=RATE_LIMIT_ENABLED)

ai_rate_limit = AI_RATE_LIMIT
