from __future__ import annotations

from fastapi import APIRouter

from main import app


def test_cors_allows_any_origin(client, fake_db):
    fake_db.queue([{"count": 10}])

    response = client.get("/api/health", headers={"Origin": "http://localhost:5173"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_unknown_route_is_json_404(client):
    response = client.get("/api/nonexistent")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_write_methods_are_not_allowed(client):
    response = client.post(
        "/api/poems/random",
        content="invalid json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 405
    assert "error" in response.json()


def test_unexpected_error_is_redacted(client):
    router = APIRouter()

    @router.get("/api/_boom")
    def boom():
        raise RuntimeError("secret connection string")

    app.include_router(router)
    try:
        response = client.get("/api/_boom")
    finally:
        app.router.routes[:] = [r for r in app.router.routes if getattr(r, "path", None) != "/api/_boom"]

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "secret" not in response.text
