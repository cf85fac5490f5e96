# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
import requests
from typing import List, Dict

from mindpulse import config

# ---------------------------
# ✅ Logger Setup
# ---------------------------

logger = logging.getLogger(__name__)


class AIError(Exception):
    """Base class for failures talking to the completion provider."""


class AIUnavailableError(AIError):
    """No usable API key is configured."""


class AITransportError(AIError):
    """Provider unreachable, timed out or answered with an error status."""


class AIResponseError(AIError):
    """Provider answered but the content is empty or malformed."""


def _headers() -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {config.API_KEY}",
    }


# ---------------------------
# ✅ Chat completion call
# ---------------------------

def get_chat_completion(messages: List[Dict[str, str]], json_mode: bool = False) -> str:
    """
    Send chat messages to the OpenAI-compatible completion endpoint and return
    the first choice's content. Single attempt, provider defaults otherwise.
    """
    if not config.has_api_key():
        logger.error("❌ AI request refused: API_KEY missing or invalid.")
        raise AIUnavailableError("Server missing API_KEY. Check .env")

    payload = {"model": config.AI_MODEL, "messages": messages}
    if json_mode:
        payload["response_format"] = {"type": "json_object"}

    url = f"{config.AI_BASE_URL}/chat/completions"
    try:
        logger.info(f"🔁 Sending {len(messages)} messages to {config.AI_MODEL}")
        response = requests.post(url, headers=_headers(), json=payload, timeout=config.AI_TIMEOUT)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.warning("⚠️ AI request failed: %s", e)
        raise AITransportError(str(e)) from e

    try:
        result = response.json()
    except ValueError as e:
        raise AIResponseError("Provider returned non-JSON body") from e

    try:
        content = result["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        logger.warning("⚠️ Unexpected AI response format: %s", result)
        raise AIResponseError("Unexpected AI response format") from e

    if not content or not content.strip():
        raise AIResponseError("Empty AI response")

    return content.strip()
