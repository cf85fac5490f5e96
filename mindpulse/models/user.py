# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, Enum, Index, func
from mindpulse.models.database import Base
import enum


class UserRole(enum.Enum):
    member = "member"
    admin = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    password = Column(String, nullable=False)  # plaintext, see DESIGN.md
    role = Column(Enum(UserRole), default=UserRole.member, nullable=False)
    group_id = Column(String, nullable=False, index=True)
    avatar = Column(String, nullable=True)

    def __repr__(self):
        return f"<User id={self.id} group={self.group_id} role={self.role.value}>"


# ✅ Emails are unique regardless of case
Index("uq_users_email_lower", func.lower(User.email), unique=True)

