# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import json
import logging
import re
from typing import List, Dict, Any, Iterable

from pydantic import ValidationError

from mindpulse.schemas.ai_schemas import EntryAnalysis, GroupReport, ChatHistoryItem
from mindpulse.services.openai_service import get_chat_completion, AIResponseError
from mindpulse.utils.date_utils import utc_now
from mindpulse.utils.prompt_templates import (
    ANALYZE_SYSTEM_PROMPT,
    CHAT_SYSTEM_PROMPT,
    REPORT_SYSTEM_PROMPT,
    OFFLINE_INTERVENTION,
    OFFLINE_TAG,
    analyze_user_prompt,
)

logger = logging.getLogger(__name__)

# Client-side role names mapped to the provider's
ROLE_MAP = {"model": "assistant"}

JSON_BLOCK = re.compile(r"\{[\s\S]*\}")


def extract_json(content: str) -> Dict[str, Any]:
    """
    Parse a JSON object out of a completion. Tolerates code fences or
    chatter around the object by taking the outermost {...} block.
    """
    try:
        data = json.loads(content)
    except (TypeError, ValueError):
        match = JSON_BLOCK.search(content or "")
        if not match:
            raise AIResponseError("AI response is not JSON")
        try:
            data = json.loads(match.group(0))
        except ValueError as e:
            raise AIResponseError("AI response is not valid JSON") from e

    if not isinstance(data, dict):
        raise AIResponseError("AI response is not a JSON object")
    return data


def offline_analysis(stress_level: int) -> EntryAnalysis:
    return EntryAnalysis(
        sentiment_score=0,
        burnout_risk=stress_level > 7,
        ai_intervention=OFFLINE_INTERVENTION,
        tags=[OFFLINE_TAG],
    )


# -------------------------
# Entry analysis
# -------------------------

def analyze_entry(note: str, stress_level: int) -> EntryAnalysis:
    messages = [
        {"role": "system", "content": ANALYZE_SYSTEM_PROMPT},
        {"role": "user", "content": analyze_user_prompt(note, stress_level)},
    ]
    data = extract_json(get_chat_completion(messages, json_mode=True))
    try:
        return EntryAnalysis.model_validate(data)
    except ValidationError as e:
        raise AIResponseError(f"AI analysis has unexpected shape: {e.error_count()} errors") from e


# -------------------------
# Chat
# -------------------------

def _history_text(item: ChatHistoryItem) -> str:
    if item.parts and item.parts[0].text:
        return item.parts[0].text
    return item.text or ""


def format_chat_history(history: Iterable[ChatHistoryItem], message: str) -> List[Dict[str, str]]:
    formatted = [
        {"role": ROLE_MAP.get(item.role, item.role), "content": _history_text(item)}
        for item in history
    ]
    formatted.append({"role": "user", "content": message})
    return formatted


def chat_reply(history: Iterable[ChatHistoryItem], message: str) -> str:
    messages = [{"role": "system", "content": CHAT_SYSTEM_PROMPT}]
    messages.extend(format_chat_history(history, message))
    reply = get_chat_completion(messages)
    logger.info("💬 AI chat reply generated")
    return reply


# -------------------------
# Group report
# -------------------------

def compress_entries(entries: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    # Only stress, mood and tags go to the provider
    return [
        {"s": e.get("stressLevel"), "m": e.get("mood"), "t": e.get("tags") or []}
        for e in entries
    ]


def group_report(entries: List[Dict[str, Any]]) -> GroupReport:
    logger.info(f"📊 Generating group report over {len(entries)} entries")
    messages = [
        {"role": "system", "content": REPORT_SYSTEM_PROMPT},
        {"role": "user", "content": json.dumps(compress_entries(entries))},
    ]
    data = extract_json(get_chat_completion(messages, json_mode=True))
    data["lastUpdated"] = utc_now().isoformat() + "Z"
    try:
        return GroupReport.model_validate(data)
    except ValidationError as e:
        raise AIResponseError(f"Group report has unexpected shape: {e.error_count()} errors") from e
