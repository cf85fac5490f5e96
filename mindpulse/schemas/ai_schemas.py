# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

from pydantic import Field, field_validator
from typing import Optional, List, Literal, Dict, Any

from mindpulse.schemas.base_schemas import CamelModel


class AnalyzeRequest(CamelModel):
    note: str = ""
    stress_level: int = Field(ge=1, le=10)

    @field_validator("note", mode="before")
    @classmethod
    def blank_note(cls, value):
        return value or ""


class EntryAnalysis(CamelModel):
    sentiment_score: Optional[float] = 0
    burnout_risk: bool = False
    ai_intervention: str = ""
    tags: List[str] = Field(default_factory=list)

    @field_validator("sentiment_score")
    @classmethod
    def clamp_score(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return None
        return max(-1.0, min(1.0, value))

    @field_validator("tags", mode="before")
    @classmethod
    def max_three_tags(cls, value):
        if isinstance(value, str):
            # "work, tired" style replies
            value = value.split(",")
        tags = [str(tag).strip() for tag in (value or [])]
        return [tag for tag in tags if tag][:3]


class ChatPart(CamelModel):
    text: str = ""


class ChatHistoryItem(CamelModel):
    role: str
    parts: Optional[List[ChatPart]] = None
    text: Optional[str] = None


class ChatRequest(CamelModel):
    history: List[ChatHistoryItem] = Field(default_factory=list)
    message: str = Field(min_length=1)

    @field_validator("history", mode="before")
    @classmethod
    def none_history(cls, value):
        return value or []


class ChatResponse(CamelModel):
    text: str


class ReportRequest(CamelModel):
    entries: List[Dict[str, Any]]


class GroupReport(CamelModel):
    overall_wellness_score: float = 0
    burnout_risk_level: Literal["Low", "Medium", "High"] = "Low"
    summary: str = ""
    recommendations: List[str] = Field(default_factory=list)
    last_updated: Optional[str] = None

    @field_validator("overall_wellness_score")
    @classmethod
    def clamp_score(cls, value: float) -> float:
        return max(0.0, min(100.0, value))

    @field_validator("burnout_risk_level", mode="before")
    @classmethod
    def capitalize_level(cls, value):
        if isinstance(value, str):
            return value.strip().capitalize()
        return value
