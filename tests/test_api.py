"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from advisor import RecommendationService
from api.app import app
from api.routes import get_service


@pytest.fixture
def client(fixed_clock):
    service = RecommendationService(default_provider="local", strict=False, clock=fixed_clock)
    app.dependency_overrides[get_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def payload():
    return {
        "projectName": "Shop",
        "developmentType": "Web Application",
        "description": "Online shop",
        "budget": "₹3,00,000 - ₹6,00,000",
        "currency": "INR",
        "timeline": "3-6 months",
        "teamSize": "Small team (2-5 people)",
        "experience": "Intermediate",
        "features": ["Payment Processing"],
    }


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "stack-advisor"}


class TestRecommendations:

    def test_local_recommendation(self, client, payload):
        response = client.post("/api/ai/recommendations", json={**payload, "aiProvider": "local"})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["provider"] == "local"
        assert body["data"]["backend"]["primary"] == "Node.js with Express"
        assert body["data"]["metadata"]["provider"] == "local"
        assert body["data"]["metadata"]["projectName"] == "Shop"
        assert "timestamp" in body

    def test_default_provider(self, client, payload):
        response = client.post("/api/ai/recommendations", json=payload)
        assert response.status_code == 200
        assert response.json()["provider"] == "local"

    def test_project_type_alias(self, client, payload):
        payload.pop("developmentType")
        payload["projectType"] = "Mobile App"
        response = client.post("/api/ai/recommendations", json=payload)
        assert response.status_code == 200
        assert response.json()["data"]["devTools"]["deployment"] == "App Store / Play Store"

    def test_unknown_provider(self, client, payload):
        response = client.post("/api/ai/recommendations", json={**payload, "aiProvider": "claude"})
        assert response.status_code == 400
        assert "claude" in response.json()["detail"]

    def test_currency_mismatch(self, client, payload):
        response = client.post(
            "/api/ai/recommendations",
            json={**payload, "budget": "$5,000 - $15,000", "currency": "INR"},
        )
        assert response.status_code == 422
        assert "does not match currency" in response.json()["detail"]

    def test_missing_budget(self, client, payload):
        payload.pop("budget")
        response = client.post("/api/ai/recommendations", json=payload)
        assert response.status_code == 422


class TestCompare:

    def test_compare_with_unknown_name(self, client, payload):
        response = client.post(
            "/api/ai/recommendations/compare",
            json={**payload, "providers": ["local", "bogus"]},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert list(body["results"]) == ["local"]
        assert body["errors"] == {"bogus": "Unsupported provider: bogus"}

    def test_compare_without_errors_omits_key(self, client, payload):
        response = client.post(
            "/api/ai/recommendations/compare",
            json={**payload, "providers": ["local"]},
        )
        assert "errors" not in response.json()

    def test_compare_currency_mismatch(self, client, payload):
        response = client.post(
            "/api/ai/recommendations/compare",
            json={**payload, "budget": "Under $5,000", "providers": ["local"]},
        )
        assert response.status_code == 422


class TestProviders:

    def test_list(self, client):
        response = client.get("/api/ai/providers")
        assert response.status_code == 200
        body = response.json()
        assert set(body["providers"]) == {"local", "openai", "gemini"}
        assert body["providers"]["local"]["available"] is True
        assert "defaultProvider" in body
