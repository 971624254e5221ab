"""
Pydantic models for API request/response schemas
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from contentcraft.config import MAX_PROMPT_LENGTH
from .status import ComplianceStatus, Segment, PipelineStage, stage_progress


# === Request Models ===

class UploadRequest(BaseModel):
    """HCP profile submitted for later video generation"""
    hcp_text: str
    document_path: Optional[str] = None  # Path previously returned by the document store
    user_id: Optional[str] = None


class GenerationRequest(BaseModel):
    """Request to generate a video from an HCP profile and a prompt"""
    prompt: str = Field(default="", max_length=MAX_PROMPT_LENGTH)
    upload_id: Optional[str] = None  # Reuse a stored profile
    hcp_text: Optional[str] = None  # Or supply one inline
    user_id: Optional[str] = None


# === Response Models ===

class UploadResponse(BaseModel):
    id: str
    user_id: str
    hcp_text: str
    document_path: Optional[str] = None
    created_at: datetime
    message: str = "Upload saved"


class ComplianceDetails(BaseModel):
    passed: bool = False
    score: int = 0
    issues: List[str] = []
    recommendations: List[str] = []
    evaluator: str = "llm"
    approved_manually: bool = False


class VideoResponse(BaseModel):
    """A generated video record"""
    id: str
    title: str
    upload_id: str
    prompt: str
    target_hcp: str
    video_url: str
    thumbnail_url: Optional[str] = None
    duration_seconds: int
    compliance_status: ComplianceStatus
    compliance_details: ComplianceDetails
    meditag_segment: Optional[Segment] = None
    segment_confidence: Optional[float] = None
    generated_script: Optional[str] = None
    provider_video_id: Optional[str] = None
    degraded: bool = False
    warnings: List[str] = []
    created_at: datetime


class SoftFailureInfo(BaseModel):
    component: str
    kind: str
    message: str


class GenerationResponse(BaseModel):
    """Response after a pipeline run"""
    id: str
    title: str
    status: ComplianceStatus
    message: str
    degraded: bool = False
    warning: Optional[str] = None
    soft_failures: List[SoftFailureInfo] = []
    video: VideoResponse


class MessageResponse(BaseModel):
    message: str


class ComplianceStatsResponse(BaseModel):
    total_videos: int
    passed: int
    review: int
    failed: int
    pass_rate: float  # percent
    average_duration_seconds: float


__all__ = [
    "ComplianceStatus",
    "Segment",
    "PipelineStage",
    "stage_progress",
    "UploadRequest",
    "GenerationRequest",
    "UploadResponse",
    "ComplianceDetails",
    "VideoResponse",
    "SoftFailureInfo",
    "GenerationResponse",
    "MessageResponse",
    "ComplianceStatsResponse",
]
