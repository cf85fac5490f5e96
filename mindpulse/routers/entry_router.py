# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mindpulse.models.database import get_db
from mindpulse.models.entry import Entry
from mindpulse.schemas.entry_schemas import EntryCreate, EntryOut, TodayStatus
from mindpulse.utils.date_utils import utc_now, utc_today

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/entries", tags=["Entries"])

DAILY_LIMIT_MESSAGE = "Daily check-in already submitted"


def find_entry_for_day(db: Session, user_id: str, day) -> Optional[Entry]:
    return db.query(Entry).filter(Entry.user_id == user_id, Entry.entry_date == day).first()


@router.get("", response_model=List[EntryOut])
def list_entries(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db)
):
    query = db.query(Entry)
    if user_id:
        query = query.filter(Entry.user_id == user_id)
    return [EntryOut.model_validate(e) for e in query.order_by(Entry.timestamp.asc()).all()]


@router.post("", response_model=EntryOut)
def create_entry(payload: EntryCreate, db: Session = Depends(get_db)):
    timestamp = payload.timestamp or utc_now()
    entry_date = timestamp.date()

    if find_entry_for_day(db, payload.user_id, entry_date):
        raise HTTPException(status_code=400, detail=DAILY_LIMIT_MESSAGE)

    entry = Entry(
        user_id=payload.user_id,
        timestamp=timestamp,
        entry_date=entry_date,
        mood=payload.mood,
        stress_level=payload.stress_level,
        energy_level=payload.energy_level,
        sleep_quality=payload.sleep_quality,
        note=payload.note,
        sentiment_score=payload.sentiment_score,
        burnout_risk=payload.burnout_risk,
        ai_intervention=payload.ai_intervention,
        tags=payload.tags,
    )
    db.add(entry)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail=DAILY_LIMIT_MESSAGE)
    db.refresh(entry)

    logger.info(f"📝 Entry {entry.id} saved for user {entry.user_id} ({entry.mood.value})")
    return EntryOut.model_validate(entry)


@router.get("/today", response_model=TodayStatus)
def today_status(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db)
):
    if not user_id:
        raise HTTPException(status_code=400, detail="UserId required")

    entry = find_entry_for_day(db, user_id, utc_today())
    return TodayStatus(
        checked_in=entry is not None,
        entry=EntryOut.model_validate(entry) if entry else None,
    )
