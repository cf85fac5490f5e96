import pytest
import requests

from mindpulse.client.api_client import MindPulseClient, ClientError, MissingAPIKeyError


class UnreachableSession:
    def post(self, url, **kwargs):
        raise requests.exceptions.ConnectionError("connection refused")

    def get(self, url, **kwargs):
        raise requests.exceptions.ConnectionError("connection refused")


@pytest.fixture
def api(client, tmp_path):
    return MindPulseClient(base_url="http://testserver", session=client, session_file=tmp_path / "session.json")


@pytest.fixture
def offline(tmp_path):
    return MindPulseClient(base_url="http://localhost:1", session=UnreachableSession(),
                           session_file=tmp_path / "session.json")


def test_signup_login_logout_persist_session(api):
    assert api.get_session() is None

    user = api.signup("Ana", "ana@example.com", "admin", "team1", "Secret1")
    assert api.get_session() == user
    assert user["groupId"] == "TEAM1"

    api.logout()
    assert api.get_session() is None

    again = api.login("ANA@example.com", "Secret1")
    assert again["id"] == user["id"]
    assert api.get_session()["email"] == "ana@example.com"


def test_login_failure_raises_and_keeps_no_session(api):
    with pytest.raises(ClientError):
        api.login("nobody@example.com", "x")
    assert api.get_session() is None


def test_signup_duplicate_surfaces_server_error(api):
    api.signup("Ana", "ana@example.com", "member", "team1", "p")
    with pytest.raises(ClientError, match="User already exists"):
        api.signup("Ana", "ana@example.com", "member", "team1", "p")


def test_group_flow(api):
    api.signup("Ana", "ana@example.com", "member", "team1", "p")

    assert [m["name"] for m in api.get_group_members("team1")] == ["Ana"]
    assert api.update_announcement("team1", "Standup moved") is True
    assert api.send_vibe("team1", "u1") == 1
    assert api.send_vibe("team1", "u1") is None
    assert api.fetch_group("team1", "u1") == {"announcement": "Standup moved", "vibes": 1, "userVibedToday": True}


def test_entries_flow(api):
    created = api.create_entry({"userId": "1", "mood": "Neutral", "stressLevel": 5, "energyLevel": 5,
                                "sleepQuality": 5, "note": "ok"})
    assert created["mood"] == "Neutral"
    assert api.create_entry({"userId": "1", "mood": "Neutral", "stressLevel": 5, "energyLevel": 5,
                             "sleepQuality": 5}) is None
    assert [e["id"] for e in api.fetch_entries()] == [created["id"]]


def test_offline_defaults(offline):
    assert offline.get_group_members("TEAM1") == []
    assert offline.fetch_entries() == []
    assert offline.create_entry({"userId": "1"}) is None
    assert offline.fetch_group("TEAM1", "u1") == {"announcement": "", "vibes": 0, "userVibedToday": False}
    assert offline.update_announcement("TEAM1", "x") is False
    assert offline.send_vibe("TEAM1", "u1") is None


def test_analyze_falls_back_offline(offline):
    result = offline.analyze_entry("long day", 9)

    assert result == {
        "sentimentScore": 0,
        "burnoutRisk": True,
        "aiIntervention": "Take a deep breath and stay hydrated. (Offline/Demo Mode)",
        "tags": ["Offline Mode"],
    }


def test_analyze_falls_back_when_server_has_no_key(api):
    assert api.analyze_entry("long day", 2)["tags"] == ["Offline Mode"]


def test_group_report_failure_is_visible(api):
    report = api.generate_group_report([])

    assert report["overallWellnessScore"] == 0
    assert report["burnoutRiskLevel"] == "Low"
    assert report["summary"].startswith("Report Generation Failed: ")
    assert "API_KEY" in report["summary"]
    assert len(report["recommendations"]) == 3


def test_chat_missing_key(api):
    with pytest.raises(MissingAPIKeyError):
        api.chat([], "hello")


def test_chat_reply(api, fake_llm):
    fake_llm.reply("I hear you.")
    assert api.chat([{"role": "model", "text": "Hi"}], "hello") == "I hear you."


def test_chat_network_error(offline):
    with pytest.raises(ClientError):
        offline.chat([], "hello")
