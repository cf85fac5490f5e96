from mindpulse.models.group import Group, VibeLog


def test_unknown_group_returns_defaults(client):
    response = client.get("/api/groups/NOPE", params={"userId": "u1"})

    assert response.status_code == 200
    assert response.json() == {"announcement": "", "vibes": 0, "userVibedToday": False}


def test_announcement_upserts_uppercased_group(client, db):
    response = client.post("/api/groups/team1/announcement", json={"announcement": "Pizza Friday"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "announcement": "Pizza Friday"}
    assert db.query(Group).filter(Group.group_id == "TEAM1").count() == 1

    client.post("/api/groups/TEAM1/announcement", json={"announcement": "Offsite Monday"})
    status = client.get("/api/groups/Team1").json()
    assert status["announcement"] == "Offsite Monday"
    assert db.query(Group).count() == 1


def test_announcement_requires_body(client):
    assert client.post("/api/groups/TEAM1/announcement", json={}).status_code == 400


def test_vibe_once_per_day(client):
    first = client.post("/api/groups/TEAM1/vibes", json={"userId": "u1"})
    second = client.post("/api/groups/TEAM1/vibes", json={"userId": "u1"})

    assert first.status_code == 200
    assert first.json() == {"success": True, "vibes": 1}
    assert second.status_code == 400
    assert second.json() == {"error": "Daily vibe limit reached"}

    status = client.get("/api/groups/TEAM1", params={"userId": "u1"}).json()
    assert status["vibes"] == 1
    assert status["userVibedToday"] is True


def test_vibe_limit_ignores_group_id_case(client):
    client.post("/api/groups/team1/vibes", json={"userId": "u1"})
    response = client.post("/api/groups/TEAM1/vibes", json={"userId": "u1"})
    assert response.status_code == 400


def test_vibes_from_different_users_accumulate(client):
    client.post("/api/groups/TEAM1/vibes", json={"userId": "u1"})
    response = client.post("/api/groups/TEAM1/vibes", json={"userId": 2})

    assert response.json() == {"success": True, "vibes": 2}
    assert client.get("/api/groups/TEAM1", params={"userId": "u3"}).json()["userVibedToday"] is False


def test_vibe_allowed_again_on_new_date(client, monkeypatch):
    monkeypatch.setattr("mindpulse.services.group_service.today_str", lambda: "2026-10-19")
    assert client.post("/api/groups/TEAM1/vibes", json={"userId": "u1"}).status_code == 200

    monkeypatch.setattr("mindpulse.services.group_service.today_str", lambda: "2026-10-20")
    response = client.post("/api/groups/TEAM1/vibes", json={"userId": "u1"})

    assert response.status_code == 200
    assert response.json()["vibes"] == 2


def test_vibe_history_is_rows_not_exposed(client, db):
    client.post("/api/groups/TEAM1/vibes", json={"userId": "u1"})

    assert db.query(VibeLog).filter(VibeLog.group_id == "TEAM1", VibeLog.user_id == "u1").count() == 1
    assert "vibeHistory" not in client.get("/api/groups/TEAM1").json()


def test_vibe_requires_user(client):
    response = client.post("/api/groups/TEAM1/vibes", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "UserId required"}


def test_group_stats(client, signup):
    ana = signup(name="Ana", email="ana@example.com", group="team1")
    bo = signup(name="Bo", email="bo@example.com", group="team1")
    outsider = signup(name="Cy", email="cy@example.com", group="other")

    base = {"energyLevel": 5, "sleepQuality": 5, "note": ""}
    client.post("/api/entries", json={**base, "userId": ana["id"], "mood": "Good", "stressLevel": 4,
                                      "sentimentScore": 0.5})
    client.post("/api/entries", json={**base, "userId": bo["id"], "mood": "Bad", "stressLevel": 9,
                                      "sentimentScore": -0.4, "burnoutRisk": True})
    client.post("/api/entries", json={**base, "userId": outsider["id"], "mood": "Great", "stressLevel": 1})

    stats = client.get("/api/groups/Team1/stats").json()

    assert stats["groupId"] == "TEAM1"
    assert stats["memberCount"] == 2
    assert stats["entryCount"] == 2
    assert stats["averageStress"] == 6.5
    assert stats["averageSentiment"] == 0.05
    assert stats["burnoutRiskCount"] == 1
    assert stats["moodCounts"] == {"Great": 0, "Good": 1, "Neutral": 0, "Bad": 1, "Awful": 0}


def test_group_stats_empty(client):
    stats = client.get("/api/groups/EMPTY/stats").json()
    assert stats["entryCount"] == 0
    assert stats["averageStress"] == 0
