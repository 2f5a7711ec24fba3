# tests/test_main_api.py
from fastapi.testclient import TestClient

# Import the FastAPI app instance from main
from main import app

# --- Test Client Setup ---
client = TestClient(app)


# --- Test Cases ---

def test_read_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_health_check():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "Personality Insight Engine"}


def test_analyze_through_app(full_payload):
    """The mounted router serves analysis under the configured prefix."""
    response = client.post("/api/v1/insights/analyze", json=full_payload)

    assert response.status_code == 200
    body = response.json()
    assert body["completeness"] == 100
    for category in ("selfImprovement", "strengths", "greenFlags", "redFlags"):
        assert 1 <= len(body[category]) <= 3
        for insight in body[category]:
            assert insight["id"].startswith(f"{category}-")


def test_analyze_empty_profile_through_app():
    response = client.post("/api/v1/insights/analyze", json={})

    assert response.status_code == 200
    body = response.json()
    assert body["completeness"] == 0
    assert body["strengths"][0]["title"] == "Authentic Self-Expression"


def test_invalid_payload_is_rejected():
    response = client.post("/api/v1/insights/analyze", json={"bigFive": {"openness": "abc"}})
    assert response.status_code == 422
