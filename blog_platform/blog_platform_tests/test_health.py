from unittest.mock import patch


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "message" in response.json()
    assert "timestamp" in response.json()


def test_ready(client):
    response = client.get("/ready")
    assert response.status_code == 200
    assert response.json()["message"] == "Service ready"
    assert response.json()["database"] == "connected"


def test_not_ready_when_database_unreachable(client):
    with patch("blog_platform.blog_platform.blog_service.routes.health.check_db_connection", return_value=False):
        response = client.get("/ready")
    assert response.status_code == 503
    body = response.json()
    assert body["message"] == "Service not ready"
    assert body["status"] == "not_ready"
    assert body["database"] == "disconnected"
    assert "detail" not in body
