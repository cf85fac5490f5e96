# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mindpulse import config
from mindpulse.models.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Infra"])


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.get("/healthz")
def deep_health_check(db: Session = Depends(get_db)):
    result = {
        "db_connection": False,
        "ai_key_configured": config.has_api_key(),
    }

    try:
        # ✅ Check DB read
        db.execute(text("SELECT 1"))
        result["db_connection"] = True
    except SQLAlchemyError as e:
        logger.error(f"🛑 Health check DB failure: {e}")
        return {"status": "error", "error": str(e), "details": result}

    return {
        "status": "ok" if all(result.values()) else "partial",
        "details": result
    }
