# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import json
import logging
import os
from pathlib import Path
from typing import Optional, List, Dict, Any

import requests

from mindpulse.utils.date_utils import utc_now
from mindpulse.services.ai_gateway import offline_analysis
from mindpulse.utils.prompt_templates import REPORT_FAILURE_RECOMMENDATIONS

logger = logging.getLogger(__name__)

DEFAULT_API_URL = os.getenv("MINDPULSE_API_URL", "http://localhost:3001")
DEFAULT_SESSION_FILE = Path.home() / ".mindpulse_session.json"


class ClientError(Exception):
    pass


class MissingAPIKeyError(ClientError):
    pass


def _ok(response) -> bool:
    return 200 <= response.status_code < 300


def _error_text(response) -> str:
    try:
        return response.json().get("error") or response.text
    except ValueError:
        return response.text


class MindPulseClient:
    """
    Python counterpart of the web app's service layer.

    Read calls degrade to empty defaults when the backend is unreachable;
    the logged-in user is kept in a local JSON file, the way the browser
    keeps it in local storage.
    """

    def __init__(self, base_url: str = DEFAULT_API_URL, session=None, session_file: Optional[Path] = None):
        self.base_url = base_url.rstrip("/")
        self.http = session or requests.Session()
        self.session_file = Path(session_file) if session_file else DEFAULT_SESSION_FILE

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api{path}"

    # -------------------------
    # Session
    # -------------------------

    def _store_session(self, user: Dict[str, Any]):
        self.session_file.write_text(json.dumps(user), encoding="utf-8")

    def get_session(self) -> Optional[Dict[str, Any]]:
        if not self.session_file.exists():
            return None
        try:
            return json.loads(self.session_file.read_text(encoding="utf-8"))
        except ValueError:
            logger.warning("⚠️ Corrupt session file ignored: %s", self.session_file)
            return None

    def logout(self):
        if self.session_file.exists():
            self.session_file.unlink()

    # -------------------------
    # Auth
    # -------------------------

    def login(self, email: str, password: str) -> Dict[str, Any]:
        response = self.http.post(self._url("/login"), json={"email": email, "password": password})
        if not _ok(response):
            raise ClientError("Invalid credentials")

        user = response.json()["user"]
        self._store_session(user)
        return user

    def signup(self, name: str, email: str, role: str, group_code: str, password: str) -> Dict[str, Any]:
        response = self.http.post(
            self._url("/signup"),
            json={"name": name, "email": email, "role": role, "groupCode": group_code, "password": password},
        )
        if not _ok(response):
            raise ClientError(_error_text(response) or "Signup failed")

        user = response.json()["user"]
        self._store_session(user)
        return user

    def get_group_members(self, group_id: str) -> List[Dict[str, Any]]:
        try:
            response = self.http.get(self._url("/users"), params={"groupId": group_id})
            return response.json() if _ok(response) else []
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to fetch members: {e}")
            return []

    # -------------------------
    # Entries
    # -------------------------

    def fetch_entries(self, user_id: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"userId": user_id} if user_id else None
        try:
            response = self.http.get(self._url("/entries"), params=params)
            return response.json() if _ok(response) else []
        except requests.exceptions.RequestException as e:
            logger.error(f"API Error: {e}")
            return []

    def create_entry(self, entry: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            response = self.http.post(self._url("/entries"), json=entry)
            return response.json() if _ok(response) else None
        except requests.exceptions.RequestException as e:
            logger.error(f"API Error: {e}")
            return None

    # -------------------------
    # Groups
    # -------------------------

    def fetch_group(self, group_id: str, user_id: str) -> Dict[str, Any]:
        default = {"announcement": "", "vibes": 0, "userVibedToday": False}
        try:
            response = self.http.get(self._url(f"/groups/{group_id}"), params={"userId": user_id})
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to fetch announcement: {e}")
            return default
        if not _ok(response):
            return default

        data = response.json()
        return {
            "announcement": data.get("announcement") or "",
            "vibes": data.get("vibes") or 0,
            "userVibedToday": data.get("userVibedToday") or False,
        }

    def update_announcement(self, group_id: str, announcement: str) -> bool:
        try:
            response = self.http.post(self._url(f"/groups/{group_id}/announcement"), json={"announcement": announcement})
            return _ok(response)
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to update announcement: {e}")
            return False

    def send_vibe(self, group_id: str, user_id: str) -> Optional[int]:
        try:
            response = self.http.post(self._url(f"/groups/{group_id}/vibes"), json={"userId": user_id})
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to send vibe: {e}")
            return None
        return response.json().get("vibes") if _ok(response) else None

    # -------------------------
    # AI
    # -------------------------

    def analyze_entry(self, note: str, stress_level: int) -> Dict[str, Any]:
        try:
            response = self.http.post(self._url("/ai/analyze"), json={"note": note, "stressLevel": stress_level})
            if not _ok(response):
                raise ClientError(f"Backend Error: {response.status_code}")
            return response.json()
        except (ClientError, requests.exceptions.RequestException) as e:
            logger.error(f"Analysis failed: {e}")
            return offline_analysis(stress_level).model_dump(by_alias=True)

    def generate_group_report(self, entries: List[Dict[str, Any]]) -> Dict[str, Any]:
        try:
            response = self.http.post(self._url("/ai/report"), json={"entries": entries})
            if not _ok(response):
                raise ClientError(_error_text(response) or "Group Report Service Failed")
            return response.json()
        except (ClientError, requests.exceptions.RequestException) as e:
            logger.error(f"Group report failed: {e}")
            return {
                "overallWellnessScore": 0,
                "burnoutRiskLevel": "Low",
                "summary": f"Report Generation Failed: {e or 'Unknown Error'}",
                "recommendations": list(REPORT_FAILURE_RECOMMENDATIONS),
                "lastUpdated": utc_now().isoformat() + "Z",
            }

    def chat(self, history: List[Dict[str, Any]], message: str) -> str:
        try:
            response = self.http.post(self._url("/ai/chat"), json={"history": history, "message": message})
        except requests.exceptions.RequestException as e:
            raise ClientError(str(e) or "Network Error") from e

        if response.status_code == 503:
            raise MissingAPIKeyError("MISSING_API_KEY")
        if not _ok(response):
            raise ClientError(_error_text(response) or "Network Error")
        return response.json()["text"]
