"""
API tests through FastAPI's TestClient

Storage lives in tmp_path; the LLM service and video provider are fakes
injected through app.dependency_overrides.
"""

import pytest
from fastapi.testclient import TestClient

from contentcraft import dependencies
from contentcraft.config import PLACEHOLDER_VIDEO_URL
from contentcraft.core import LLMServiceError, ProviderErrorKind, VideoProviderError
from contentcraft.main import app
from contentcraft.services.pipeline.video_synthesis import VideoSynthesizer

HCP_TEXT = "Cardiologist, prescription_rate: 0.8, years_experience: 12"
PROMPT = "Create a video about a new heart failure drug"


@pytest.fixture
def llm(make_llm, good_script):
    return make_llm({
        "script_drafting": {"script": good_script, "duration": 8, "targetAudience": "Cardiologist"},
        "compliance_review": {"passed": False, "score": 65, "issues": ["Add safety info"], "recommendations": []},
    })


@pytest.fixture
def video_provider(make_video_provider):
    return make_video_provider()


@pytest.fixture
def client(upload_repo, video_repo, document_store, llm, video_provider, fast_settings):
    app.dependency_overrides[dependencies.get_upload_repository] = lambda: upload_repo
    app.dependency_overrides[dependencies.get_video_repository] = lambda: video_repo
    app.dependency_overrides[dependencies.get_document_store] = lambda: document_store
    app.dependency_overrides[dependencies.get_llm_service] = lambda: llm
    app.dependency_overrides[dependencies.get_video_synthesizer] = lambda: VideoSynthesizer(video_provider, fast_settings)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def generate(client, **body):
    return client.post("/videos/generate", json={"prompt": PROMPT, "hcp_text": HCP_TEXT, **body})


# --- Service endpoints ---

def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["version"] == "1.0.0"


def test_health_reports_missing_credentials(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert data["checks"]["video_provider"] == {"provider": "heygen", "credentials_configured": False}
    assert data["checks"]["llm_provider"]["provider"] == "ollama"


def test_health_with_credentials(client, monkeypatch):
    monkeypatch.setenv("HEYGEN_API_KEY", "hg")
    assert client.get("/health").json()["status"] == "healthy"


def test_request_id_is_echoed(client):
    response = client.get("/", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


# --- Uploads ---

def test_create_upload(client, upload_repo):
    response = client.post("/uploads", json={"hcp_text": HCP_TEXT, "user_id": "user-1"})
    assert response.status_code == 201
    data = response.json()
    assert data["hcp_text"] == HCP_TEXT
    assert data["user_id"] == "user-1"
    assert upload_repo.get(data["id"]).hcp_text == HCP_TEXT


def test_create_upload_blank_text(client):
    response = client.post("/uploads", json={"hcp_text": "  "})
    assert response.status_code == 400
    assert response.json()["detail"] == "HCP information is required"


def test_create_upload_missing_field(client):
    assert client.post("/uploads", json={}).status_code == 422


def test_create_upload_unknown_document(client):
    response = client.post("/uploads", json={"hcp_text": HCP_TEXT, "document_path": "/uploads/none.txt"})
    assert response.status_code == 400


# --- Generation ---

def test_generate_video(client, video_repo):
    response = generate(client)
    assert response.status_code == 201
    data = response.json()

    assert data["status"] == "Review"
    assert data["degraded"] is False
    assert data["warning"] is None
    video = data["video"]
    assert video["title"] == "Cardiologist Video Heart Failure"
    assert video["meditag_segment"] == "Early Adopter"
    assert video["segment_confidence"] == 0.85
    assert video["compliance_details"]["issues"] == ["Add safety info"]
    assert video["video_url"] == "https://cdn.example.com/v/job-1.mp4"
    assert video_repo.get(data["id"]) is not None


def test_generate_from_upload(client):
    upload_id = client.post("/uploads", json={"hcp_text": "Oncologist, years_experience: 20"}).json()["id"]
    response = client.post("/videos/generate", json={"prompt": "Immunotherapy update", "upload_id": upload_id})
    assert response.status_code == 201
    assert response.json()["video"]["upload_id"] == upload_id
    assert response.json()["video"]["meditag_segment"] == "Evidence Driven"


def test_generate_degraded_with_placeholder(client, video_provider):
    video_provider.receipt = VideoProviderError("Insufficient credits", kind=ProviderErrorKind.QUOTA, provider="veo")
    response = generate(client)

    assert response.status_code == 201
    data = response.json()
    assert data["degraded"] is True
    assert "credits" in data["warning"]
    assert data["soft_failures"] == [
        {"component": "video_synthesis", "kind": "quota", "message": "Insufficient credits"},
    ]
    assert data["video"]["video_url"] == PLACEHOLDER_VIDEO_URL


def test_generate_blank_prompt(client, video_repo, tmp_path):
    response = client.post("/videos/generate", json={"prompt": "", "hcp_text": ""})
    assert response.status_code == 400
    assert list((tmp_path / "uploads").glob("*.json")) == []
    assert video_repo.list() == []


def test_generate_prompt_too_long(client):
    assert generate(client, prompt="x" * 501).status_code == 422


def test_generate_unknown_upload(client):
    response = client.post("/videos/generate", json={"prompt": PROMPT, "upload_id": "missing"})
    assert response.status_code == 404


def test_generate_drafting_failure(client, llm, video_repo):
    llm.responses["script_drafting"] = LLMServiceError("down")
    response = generate(client)
    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to generate script. Please try again later."
    assert video_repo.list() == []


# --- Library ---

def test_list_get_delete(client):
    first = generate(client).json()["id"]
    second = generate(client).json()["id"]

    listed = client.get("/videos").json()
    assert {v["id"] for v in listed} == {first, second}
    assert len(client.get("/videos", params={"limit": 1}).json()) == 1

    assert client.get(f"/videos/{first}").json()["id"] == first
    assert client.delete(f"/videos/{first}").status_code == 200
    assert client.get(f"/videos/{first}").status_code == 404


def test_delete_unknown_video(client):
    response = client.delete("/videos/nonexistent")
    assert response.status_code == 404


def test_invalid_limit(client):
    assert client.get("/videos", params={"limit": 0}).status_code == 422


def test_approve_compliance(client):
    video_id = generate(client).json()["id"]
    response = client.post(f"/videos/{video_id}/approve-compliance")
    assert response.status_code == 200
    data = response.json()
    assert data["compliance_status"] == "Passed"
    assert data["compliance_details"]["approved_manually"] is True


def test_approve_unknown_video(client):
    assert client.post("/videos/missing/approve-compliance").status_code == 404


# --- Stats ---

def test_stats_empty(client):
    response = client.get("/stats/compliance")
    assert response.status_code == 200
    assert response.json() == {
        "total_videos": 0,
        "passed": 0,
        "review": 0,
        "failed": 0,
        "pass_rate": 0.0,
        "average_duration_seconds": 0.0,
    }


def test_stats_after_generation(client):
    video_id = generate(client).json()["id"]
    generate(client)
    client.post(f"/videos/{video_id}/approve-compliance")

    stats = client.get("/stats/compliance").json()
    assert stats["total_videos"] == 2
    assert stats["passed"] == 1
    assert stats["review"] == 1
    assert stats["pass_rate"] == 50.0
    assert stats["average_duration_seconds"] == 8.0
