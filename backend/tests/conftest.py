"""
Shared test doubles for the pipeline collaborators
"""

from typing import Any, Dict, List, Optional

import pytest

from contentcraft.config import VideoSynthesisSettings
from contentcraft.services.infrastructure.storage import (
    DocumentStore,
    FileBasedUploadRepository,
    FileBasedVideoRepository,
)
from contentcraft.services.pipeline.video_synthesis import (
    ResolutionState,
    ResolutionStatus,
    SubmissionReceipt,
    VideoSynthesisProvider,
)

GOOD_SCRIPT = "Clinical trial data suggest improved outcomes for your heart failure patients."


class FakeLLMService:
    """Stands in for StructuredLLMService; replies are keyed by pipeline step"""

    def __init__(self, responses: Optional[Dict[str, Any]] = None):
        self.responses = dict(responses or {})
        self.calls: List[Dict[str, Any]] = []

    async def complete_json(self, system_instruction, user_content, response_schema=None, step="script_drafting"):
        self.calls.append({
            "system_instruction": system_instruction,
            "user_content": user_content,
            "response_schema": response_schema,
            "step": step,
        })
        reply = self.responses[step]
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeVideoProvider(VideoSynthesisProvider):
    """In-memory provider: submit returns `receipt` (or raises it); resolve walks `statuses`"""

    name = "fake"
    presenters = {"Cardiologist": "presenter-cardio"}
    default_presenter = "presenter-default"

    def __init__(self, receipt=None, statuses=None):
        self.receipt = receipt or SubmissionReceipt(job_id="job-1")
        self.statuses = list(statuses or [
            ResolutionStatus(ResolutionState.COMPLETED, media_url="https://cdn.example.com/v/job-1.mp4"),
        ])
        self.submitted: List[tuple] = []
        self.resolved: List[str] = []

    async def submit(self, narration, presenter_id):
        self.submitted.append((narration, presenter_id))
        if isinstance(self.receipt, Exception):
            raise self.receipt
        return self.receipt

    async def resolve(self, job_id):
        self.resolved.append(job_id)
        status = self.statuses.pop(0) if len(self.statuses) > 1 else self.statuses[0]
        if isinstance(status, Exception):
            raise status
        return status


@pytest.fixture
def upload_repo(tmp_path):
    return FileBasedUploadRepository(tmp_path / "uploads")


@pytest.fixture
def video_repo(tmp_path):
    return FileBasedVideoRepository(tmp_path / "videos")


@pytest.fixture
def document_dir(tmp_path):
    path = tmp_path / "documents"
    path.mkdir()
    return path


@pytest.fixture
def document_store(document_dir):
    return DocumentStore(base_dir=document_dir)


@pytest.fixture
def fast_settings():
    return VideoSynthesisSettings(poll_interval_seconds=0.0, poll_timeout_seconds=1.0)


@pytest.fixture
def make_llm():
    return FakeLLMService


@pytest.fixture
def make_video_provider():
    return FakeVideoProvider


@pytest.fixture
def good_script():
    return GOOD_SCRIPT
