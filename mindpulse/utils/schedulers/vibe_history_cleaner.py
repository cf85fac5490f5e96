# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mindpulse import config
from mindpulse.models.database import SessionLocal
from mindpulse.models.group import VibeLog
from mindpulse.utils.date_utils import days_ago_str

logger = logging.getLogger("cleanup")


def clean_old_vibe_logs(retention_days: int = None) -> int:
    """Drop vibe history past the retention window. Group counters are kept."""
    retention_days = config.VIBE_RETENTION_DAYS if retention_days is None else retention_days
    cutoff = days_ago_str(retention_days)

    db: Session = SessionLocal()
    try:
        count = (
            db.query(VibeLog)
            .filter(VibeLog.date < cutoff)
            .delete(synchronize_session=False)
        )
        db.commit()
        logger.info(f"✅ VibeLog cleanup completed. Deleted {count} records older than {cutoff}.")
        return count

    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"🛑 VibeLog cleanup failed: {e}", exc_info=True)
        return 0
    finally:
        db.close()
