def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_healthz_reports_missing_key_as_partial(client):
    body = client.get("/healthz").json()
    assert body == {"status": "partial", "details": {"db_connection": True, "ai_key_configured": False}}


def test_healthz_ok_with_key(client, ai_key):
    assert client.get("/healthz").json()["status"] == "ok"


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
