# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, DateTime, Date, Float, Boolean, Text, Enum, JSON, UniqueConstraint
from mindpulse.models.database import Base
from mindpulse.utils.date_utils import utc_now
import enum


class Mood(enum.Enum):
    Great = "Great"
    Good = "Good"
    Neutral = "Neutral"
    Bad = "Bad"
    Awful = "Awful"


class Entry(Base):
    __tablename__ = "entries"
    __table_args__ = (
        # ✅ One check-in per user per calendar day
        UniqueConstraint("user_id", "entry_date", name="uq_entry_user_day"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    timestamp = Column(DateTime, default=utc_now, nullable=False)
    entry_date = Column(Date, nullable=False)

    mood = Column(Enum(Mood), nullable=False)
    stress_level = Column(Integer, nullable=False)
    energy_level = Column(Integer, nullable=False)
    sleep_quality = Column(Integer, nullable=False)
    note = Column(Text, default="")

    # AI analyzed fields
    sentiment_score = Column(Float, nullable=True)
    burnout_risk = Column(Boolean, default=False)
    ai_intervention = Column(Text, nullable=True)
    tags = Column(JSON, default=list)

    def __repr__(self):
        return f"<Entry id={self.id} user={self.user_id} date={self.entry_date} mood={self.mood.value}>"
