# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


from .user import User, UserRole
from .entry import Entry, Mood
from .group import Group, VibeLog
