"""
Smoke tests for the HTTP endpoints.
Scoring endpoints run the real scorer; enhancement endpoints use a fake LLM call.
"""
import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import app
from app.services import llm_service

client = TestClient(app)

SCENARIO_BODY = {
    "personalInfo": {
        "fullName": "Jane Smith",
        "email": "jane@example.com",
        "phone": "555-123-4567",
        "location": None,
    },
    "education": [{
        "institution": "State University",
        "degree": "BSc",
        "field": "Biology",
        "startDate": "2015",
        "endDate": "2019",
    }],
    "experience": [{
        "company": "Acme",
        "position": "Clerk",
        "location": "Springfield",
        "startDate": "2019",
        "endDate": "2021",
        "current": False,
        "responsibilities": ["Sorted paperwork for the office", "Answered phones for the team"],
        "achievements": [],
    }],
}


@pytest.fixture
def no_server_keys(monkeypatch):
    for name in ("groq_api_key", "gemini_api_key", "openai_api_key", "openrouter_api_key"):
        monkeypatch.setattr(settings, name, None)


@pytest.fixture
def echo_llm(monkeypatch):
    async def fake_complete(**kwargs):
        return "Enhanced: " + kwargs["prompt_name"]

    monkeypatch.setattr(llm_service, "complete", fake_complete)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_score_endpoint_uses_camel_case():
    response = client.post("/api/ats/score", json={"resumeData": SCENARIO_BODY})
    assert response.status_code == 200
    data = response.json()
    assert data["overall"] == 45
    assert data["breakdown"] == {"formatting": 75, "keywords": 0, "content": 69, "completeness": 45}
    assert len(data["suggestions"]) == 6


def test_score_endpoint_accepts_empty_resume():
    response = client.post("/api/ats/score", json={"resumeData": {}, "jobDescription": None})
    assert response.status_code == 200
    breakdown = response.json()["breakdown"]
    assert breakdown["formatting"] == 20
    assert breakdown["content"] == 15


def test_score_endpoint_requires_resume():
    response = client.post("/api/ats/score", json={"jobDescription": "Python developer"})
    assert response.status_code == 422


def test_tips_endpoint():
    response = client.post("/api/ats/tips", json={"resumeData": SCENARIO_BODY})
    assert response.status_code == 200
    tips = response.json()["tips"]
    assert tips[0]["category"] == "critical"
    assert {"category", "section", "issue", "tip", "impact"} <= set(tips[0])


def test_compare_endpoint():
    before = client.post("/api/ats/score", json={"resumeData": {}}).json()
    after = client.post("/api/ats/score", json={"resumeData": SCENARIO_BODY}).json()

    response = client.post("/api/ats/compare", json={"before": before, "after": after})
    assert response.status_code == 200
    data = response.json()
    assert data["improvement"] == 45 - 9
    assert data["changes"][0] == {"section": "Formatting", "before": 20, "after": 75, "change": 55}


def test_providers_endpoint():
    response = client.get("/api/enhance/providers")
    assert response.status_code == 200
    ids = [p["id"] for p in response.json()["providers"]]
    assert "google" in ids and "openai" in ids


def test_enhance_content_requires_key(no_server_keys):
    response = client.post("/api/enhance/content", json={"content": "Did reports", "provider": "groq", "modelKey": "llama-3.3-70b"})
    assert response.status_code == 400


def test_enhance_content_rejects_unknown_provider():
    response = client.post(
        "/api/enhance/content",
        json={"content": "Did reports", "provider": "nope", "modelKey": "x"},
        headers={"X-Groq-Key": "k"},
    )
    assert response.status_code == 422


def test_enhance_content_requires_content():
    response = client.post("/api/enhance/content", json={"content": "  "}, headers={"X-Google-Key": "k"})
    assert response.status_code == 400


def test_enhance_content(echo_llm):
    response = client.post(
        "/api/enhance/content",
        json={"content": "A todo app", "type": "project description"},
        headers={"X-Google-Key": "k"},
    )
    assert response.status_code == 200
    assert response.json() == {"enhancedContent": "Enhanced: enhance_text"}


def test_enhance_resume(echo_llm):
    response = client.post(
        "/api/enhance/resume",
        json={"resumeData": SCENARIO_BODY, "provider": "openai", "modelKey": "gpt-4o-mini"},
        headers={"X-OpenAI-Key": "k"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["enhanced"]["experience"][0]["responsibilities"] == ["Enhanced: enhance_bullets"]
    assert data["enhanced"]["personalInfo"]["fullName"] == "Jane Smith"
    assert [s["id"] for s in data["suggestions"]] == ["exp-resp-0-0", "exp-resp-0-1"]


def test_improvement_suggestions_fall_back(monkeypatch):
    async def broken_complete(**kwargs):
        raise TimeoutError("slow provider")

    monkeypatch.setattr(llm_service, "complete", broken_complete)
    response = client.post(
        "/api/enhance/suggestions",
        json={"resumeData": SCENARIO_BODY},
        headers={"X-Google-Key": "k"},
    )
    assert response.status_code == 200
    assert len(response.json()["suggestions"]) == 5
