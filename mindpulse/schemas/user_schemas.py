# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

from pydantic import field_validator
from typing import Optional, Union

from mindpulse.models.user import UserRole
from mindpulse.schemas.base_schemas import CamelModel


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class SignupRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    role: UserRole = UserRole.member
    group_code: Optional[str] = None
    password: Optional[str] = None

    @field_validator("role", mode="before")
    @classmethod
    def default_role(cls, value):
        return value or UserRole.member


class UserOut(CamelModel):
    id: Union[int, str]
    name: str
    email: str
    role: UserRole
    group_id: str
    avatar: Optional[str] = None

    @field_validator("role", mode="before")
    @classmethod
    def default_role(cls, value):
        return value or UserRole.member


class AuthResponse(CamelModel):
    user: UserOut
