# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging

from fastapi import APIRouter, HTTPException, Request

from mindpulse.schemas.ai_schemas import (
    AnalyzeRequest,
    EntryAnalysis,
    ChatRequest,
    ChatResponse,
    ReportRequest,
    GroupReport,
)
from mindpulse.services.ai_gateway import analyze_entry, chat_reply, group_report, offline_analysis
from mindpulse.services.openai_service import AIError, AIUnavailableError, AITransportError
from mindpulse.utils.rate_limit_utils import limiter, ai_rate_limit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["AI"])


@router.post("/analyze", response_model=EntryAnalysis)
@limiter.limit(ai_rate_limit)
def analyze(request: Request, payload: AnalyzeRequest):
    logger.info(f"🧠 AI Analyze Request: Stress {payload.stress_level}")
    try:
        return analyze_entry(payload.note, payload.stress_level)
    except AIUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except AITransportError:
        logger.exception("❌ AI Analysis unreachable, serving offline analysis")
        return offline_analysis(payload.stress_level)
    except AIError as e:
        logger.error(f"❌ AI Analysis Failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/chat", response_model=ChatResponse)
@limiter.limit(ai_rate_limit)
def chat(request: Request, payload: ChatRequest):
    try:
        return ChatResponse(text=chat_reply(payload.history, payload.message))
    except AIUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except AIError as e:
        logger.error(f"❌ AI Chat Failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/report", response_model=GroupReport)
@limiter.limit(ai_rate_limit)
def report(request: Request, payload: ReportRequest):
    try:
        return group_report(payload.entries)
    except AIUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except AIError as e:
        logger.error(f"❌ Group Report Failed: {e}")
        raise HTTPException(status_code=500, detail=f"Report generation failed: {e}")
