# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from mindpulse.models.database import get_db
from mindpulse.schemas.group_schemas import (
    GroupStatus,
    AnnouncementRequest,
    AnnouncementResponse,
    VibeRequest,
    VibeResponse,
    GroupStats,
)
from mindpulse.services.group_service import (
    DailyVibeLimitReached,
    normalize_group_id,
    get_group_status,
    set_announcement,
    send_vibe,
    get_group_stats,
)

router = APIRouter(prefix="/api/groups", tags=["Groups"])


@router.get("/{group_id}", response_model=GroupStatus)
def group_status(
    group_id: str,
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db)
):
    return get_group_status(db, normalize_group_id(group_id), user_id)


@router.post("/{group_id}/announcement", response_model=AnnouncementResponse)
def update_announcement(group_id: str, payload: AnnouncementRequest, db: Session = Depends(get_db)):
    group = set_announcement(db, normalize_group_id(group_id), payload.announcement)
    return AnnouncementResponse(success=True, announcement=group.announcement)


@router.post("/{group_id}/vibes", response_model=VibeResponse)
def vibe(group_id: str, payload: VibeRequest, db: Session = Depends(get_db)):
    if not payload.user_id:
        raise HTTPException(status_code=400, detail="UserId required")

    try:
        vibes = send_vibe(db, normalize_group_id(group_id), payload.user_id)
    except DailyVibeLimitReached:
        raise HTTPException(status_code=400, detail="Daily vibe limit reached")

    return VibeResponse(success=True, vibes=vibes)


@router.get("/{group_id}/stats", response_model=GroupStats)
def group_stats(group_id: str, db: Session = Depends(get_db)):
    """Dashboard aggregates over every entry logged by the group's members."""
    return get_group_stats(db, normalize_group_id(group_id))
