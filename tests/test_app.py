from fastapi.testclient import TestClient

from showcase_api.app.core.config import Settings
from showcase_api.app.main import create_app


def test_hello_endpoint(client):
    response = client.get("/api/hello")

    assert response.status_code == 200
    assert response.json() == {"message": "Hello from API!"}


def test_api_prefix_comes_from_settings():
    app = create_app(settings=Settings(api_prefix="/v2"))

    with TestClient(app) as client:
        assert client.get("/v2/hello").status_code == 200
        assert client.get("/v2/users").json()["total"] == 5
        assert client.get("/api/hello").status_code == 404


def test_configured_timezone_is_used():
    app = create_app(settings=Settings(timezone="UTC"))

    with TestClient(app) as client:
        assert client.get("/api/time").json()["timezone"] == "UTC"
