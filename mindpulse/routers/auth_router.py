# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mindpulse.config import DEFAULT_PASSWORD, AVATAR_URL_TEMPLATE
from mindpulse.models.database import get_db
from mindpulse.models.user import User
from mindpulse.schemas.user_schemas import LoginRequest, SignupRequest, AuthResponse, UserOut
from mindpulse.services.group_service import normalize_group_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Auth"])


def find_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    if not payload.email or payload.password is None:
        raise HTTPException(status_code=400, detail="Email and password required")

    user = find_user_by_email(db, payload.email)
    if user and user.password == payload.password:
        logger.info(f"🔓 Login: user {user.id}")
        return AuthResponse(user=UserOut.model_validate(user))

    raise HTTPException(status_code=401, detail="Invalid credentials")


@router.post("/signup", response_model=AuthResponse)
def signup(payload: SignupRequest, db: Session = Depends(get_db)):
    if not payload.name or not payload.email:
        raise HTTPException(status_code=400, detail="Name and email required")
    group_id = normalize_group_id(payload.group_code)
    if not group_id:
        raise HTTPException(status_code=400, detail="Group code required")

    if find_user_by_email(db, payload.email):
        raise HTTPException(status_code=400, detail="User already exists")

    user = User(
        name=payload.name,
        email=payload.email.strip(),
        password=payload.password or DEFAULT_PASSWORD,
        role=payload.role,
        group_id=group_id,
        avatar=AVATAR_URL_TEMPLATE.format(seed=payload.name),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="User already exists")
    db.refresh(user)

    logger.info(f"✅ Signup: user {user.id} joined {group_id}")
    return AuthResponse(user=UserOut.model_validate(user))


@router.get("/users", response_model=List[UserOut])
def list_group_members(
    group_id: Optional[str] = Query(None, alias="groupId"),
    db: Session = Depends(get_db)
):
    if not group_id:
        raise HTTPException(status_code=400, detail="GroupId required")

    members = db.query(User).filter(User.group_id == normalize_group_id(group_id)).all()
    return [UserOut.model_validate(m) for m in members]
