def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_health_db(client):
    res = client.get("/health/db")

    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_health_db_reports_failure(client, app, monkeypatch):
    def boom():
        raise RuntimeError("down")

    monkeypatch.setattr(app.state.engine, "connect", boom)

    res = client.get("/health/db")

    assert res.status_code == 500
    assert res.json() == {"detail": "Database connection failed"}
