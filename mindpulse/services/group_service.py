# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from collections import Counter
from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mindpulse.models.entry import Entry, Mood
from mindpulse.models.group import Group, VibeLog
from mindpulse.models.user import User
from mindpulse.schemas.group_schemas import GroupStatus, GroupStats
from mindpulse.utils.date_utils import today_str

logger = logging.getLogger(__name__)


class DailyVibeLimitReached(Exception):
    pass


def normalize_group_id(group_id: str) -> str:
    return (group_id or "").strip().upper()


def get_group(db: Session, group_id: str) -> Optional[Group]:
    return db.query(Group).filter(Group.group_id == group_id).first()


def ensure_group(db: Session, group_id: str) -> Group:
    """Fetch the group row, creating it if needed. Commits on create."""
    group = get_group(db, group_id)
    if group:
        return group

    db.add(Group(group_id=group_id, announcement="", vibes=0))
    try:
        db.commit()
    except IntegrityError:
        # Another request created it first
        db.rollback()
    return get_group(db, group_id)


def has_vibed_today(db: Session, group_id: str, user_id: str) -> bool:
    return (
        db.query(VibeLog.id)
        .filter(
            VibeLog.group_id == group_id,
            VibeLog.user_id == str(user_id),
            VibeLog.date == today_str(),
        )
        .first()
        is not None
    )


def get_group_status(db: Session, group_id: str, user_id: Optional[str] = None) -> GroupStatus:
    group = get_group(db, group_id)
    if not group:
        return GroupStatus()

    vibed = has_vibed_today(db, group_id, user_id) if user_id else False
    return GroupStatus(
        announcement=group.announcement or "",
        vibes=group.vibes or 0,
        user_vibed_today=vibed,
    )


def set_announcement(db: Session, group_id: str, announcement: str) -> Group:
    group = ensure_group(db, group_id)
    group.announcement = announcement
    db.commit()
    db.refresh(group)
    logger.info(f"📢 Announcement updated for group {group_id}")
    return group


def send_vibe(db: Session, group_id: str, user_id: str) -> int:
    """
    Record today's vibe for the user and bump the group counter.

    The (group, user, date) unique constraint rejects a second vibe on the
    same day, and the counter is incremented in SQL, so concurrent requests
    cannot double count.
    """
    ensure_group(db, group_id)

    db.add(VibeLog(group_id=group_id, user_id=str(user_id), date=today_str()))
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        logger.info(f"🚫 Daily vibe limit reached: user {user_id} in {group_id}")
        raise DailyVibeLimitReached()

    db.execute(
        update(Group)
        .where(Group.group_id == group_id)
        .values(vibes=Group.vibes + 1)
    )
    vibes = db.query(Group.vibes).filter(Group.group_id == group_id).scalar()
    db.commit()

    logger.info(f"💜 Vibe from user {user_id} in {group_id}, total {vibes}")
    return vibes


def get_group_stats(db: Session, group_id: str) -> GroupStats:
    member_ids = [str(uid) for (uid,) in db.query(User.id).filter(User.group_id == group_id).all()]

    entries = []
    if member_ids:
        entries = db.query(Entry).filter(Entry.user_id.in_(member_ids)).all()

    count = len(entries)
    avg_stress = sum(e.stress_level for e in entries) / count if count else 0
    avg_sentiment = sum(e.sentiment_score or 0 for e in entries) / count if count else 0

    mood_counts = Counter({mood.value: 0 for mood in Mood})
    mood_counts.update(e.mood.value for e in entries)

    return GroupStats(
        group_id=group_id,
        member_count=len(member_ids),
        entry_count=count,
        average_stress=round(avg_stress, 2),
        average_sentiment=round(avg_sentiment, 2),
        burnout_risk_count=sum(1 for e in entries if e.burnout_risk),
        mood_counts=dict(mood_counts),
    )
