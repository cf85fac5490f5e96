# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

from datetime import datetime, timezone
from pydantic import Field, field_validator, field_serializer
from typing import Optional, List, Union

from mindpulse.models.entry import Mood
from mindpulse.schemas.base_schemas import CamelModel, coerce_id


class EntryCreate(CamelModel):
    # A client-side "id" is accepted and ignored
    user_id: str
    timestamp: Optional[datetime] = None
    mood: Mood
    stress_level: int = Field(ge=1, le=10)
    energy_level: int = Field(ge=1, le=10)
    sleep_quality: int = Field(ge=1, le=10)
    note: str = ""

    sentiment_score: Optional[float] = Field(default=None, ge=-1, le=1)
    burnout_risk: bool = False
    ai_intervention: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("user_id", mode="before")
    @classmethod
    def coerce_user_id(cls, value):
        return coerce_id(value)

    @field_validator("timestamp")
    @classmethod
    def to_naive_utc(cls, value: Optional[datetime]):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    @field_validator("note", mode="before")
    @classmethod
    def blank_note(cls, value):
        return value or ""


class EntryOut(CamelModel):
    id: Union[int, str]
    user_id: str
    timestamp: datetime
    mood: Mood
    stress_level: int
    energy_level: int
    sleep_quality: int
    note: Optional[str] = ""
    sentiment_score: Optional[float] = None
    burnout_risk: bool = False
    ai_intervention: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def none_tags(cls, value):
        return value or []

    @field_serializer("timestamp")
    def utc_timestamp(self, value: datetime) -> str:
        # Stored naive UTC, always sent with a Z offset
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class TodayStatus(CamelModel):
    checked_in: bool
    entry: Optional[EntryOut] = None
