def test_root(client):
    body = client.get("/").json()
    assert body["status"] == "running"
    assert body["api"] == "/api/v1"


def test_health(client):
    body = client.get("/api/v1/health").json()
    assert body["status"] == "healthy"
    assert set(body["live_collections"]) == {"shops", "brands", "orders", "expenses", "routes", "settings"}


def test_cors_preflight_for_allowed_origin(client):
    response = client.options(
        "/api/v1/orders",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        }
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
