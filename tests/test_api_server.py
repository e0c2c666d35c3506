"""
HTTP API tests.

Uses FastAPI's TestClient with the ContentService dependency overridden.
"""

import pytest
from fastapi.testclient import TestClient

from services.api.server import app, get_service
from services.content_studio.fallback import PLACEHOLDER_IMAGE


@pytest.fixture
def demo_client(demo_service):
    app.dependency_overrides[get_service] = lambda: demo_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def live_client(live_service):
    app.dependency_overrides[get_service] = lambda: live_service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestDemoEndpoints:

    def test_health(self, demo_client):
        response = demo_client.get("/health")
        assert response.status_code == 200
        assert response.json()["live"] is False

    def test_trends(self, demo_client):
        body = demo_client.get("/trends").json()
        assert body["mode"] == "demo"
        assert len(body["value"]) == 5
        assert set(body["value"][0]) == {"keyword", "category", "volume", "growth"}

    def test_plan_uses_camel_case_fields(self, demo_client):
        response = demo_client.post("/plan", json={"keyword": "여름 페스티벌"})

        assert response.status_code == 200
        body = response.json()
        assert body["mode"] == "demo"
        assert "visualPrompt" in body["value"]
        assert "visual_prompt" not in body["value"]
        assert body["value"]["title"].endswith("(Demo)")

    def test_plan_rejects_bad_location(self, demo_client):
        response = demo_client.post(
            "/plan", json={"keyword": "빙수", "location": {"lat": 123.0, "lng": 0}}
        )
        assert response.status_code == 422

    def test_thumbnail(self, demo_client):
        body = demo_client.post("/thumbnail", json={"prompt": "a red bicycle", "size": "2K"}).json()
        assert body["value"]["url"] == PLACEHOLDER_IMAGE
        assert body["value"]["size"] == "2K"

    def test_thumbnail_rejects_unknown_size(self, demo_client):
        response = demo_client.post("/thumbnail", json={"prompt": "a red bicycle", "size": "8K"})
        assert response.status_code == 422

    def test_credentials(self, demo_client):
        assert demo_client.get("/credentials").json() == {"available": False}
        assert demo_client.post("/credentials/select").json() == {"available": False}


class TestLiveEndpoints:

    def test_plan_with_location(self, live_client, mock_client, make_response, plan_payload):
        mock_client.models.generate_content.return_value = make_response(
            text=plan_payload,
            chunks=[{"maps": {"title": "Nanji Park", "uri": "https://maps/nanji"}}],
        )

        body = live_client.post(
            "/plan",
            json={"keyword": "여름 페스티벌", "location": {"lat": 37.56, "lng": 126.89}},
        ).json()

        assert body["mode"] == "live"
        assert body["value"]["places"][0]["title"] == "Nanji Park"
        config = mock_client.models.generate_content.call_args.kwargs["config"]
        assert config.tools[1].google_maps is not None

    def test_failed_call_is_still_200(self, live_client, mock_client):
        mock_client.models.generate_content.side_effect = RuntimeError("boom")

        response = live_client.get("/trends")

        assert response.status_code == 200
        assert response.json()["mode"] == "fallback"
