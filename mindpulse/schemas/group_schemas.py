# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

from pydantic import field_validator
from typing import Optional, Dict

from mindpulse.schemas.base_schemas import CamelModel, coerce_id


class GroupStatus(CamelModel):
    announcement: str = ""
    vibes: int = 0
    user_vibed_today: bool = False


class AnnouncementRequest(CamelModel):
    announcement: str


class AnnouncementResponse(CamelModel):
    success: bool
    announcement: str


class VibeRequest(CamelModel):
    user_id: Optional[str] = None

    @field_validator("user_id", mode="before")
    @classmethod
    def coerce_user_id(cls, value):
        return coerce_id(value)


class VibeResponse(CamelModel):
    success: bool
    vibes: int


class GroupStats(CamelModel):
    group_id: str
    member_count: int
    entry_count: int
    average_stress: float
    average_sentiment: float
    burnout_risk_count: int
    mood_counts: Dict[str, int]
