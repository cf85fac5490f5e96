# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from mindpulse.models.database import Base
from mindpulse.utils.date_utils import utc_now


class Group(Base):
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(String, nullable=False, unique=True, index=True)
    announcement = Column(Text, default="")
    vibes = Column(Integer, default=0, nullable=False)

    # Internal only, never serialized to clients
    vibe_history = relationship("VibeLog", back_populates="group", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Group {self.group_id} vibes={self.vibes}>"


class VibeLog(Base):
    __tablename__ = "vibe_logs"
    __table_args__ = (
        # ✅ One vibe per user per group per day, enforced by the database
        UniqueConstraint("group_id", "user_id", "date", name="uq_vibe_group_user_day"),
    )

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(String, ForeignKey("groups.group_id"), nullable=False, index=True)
    user_id = Column(String, nullable=False)
    date = Column(String(10), nullable=False)  # YYYY-MM-DD (UTC)
    created_at = Column(DateTime, default=utc_now)

    group = relationship("Group", back_populates="vibe_history")
