"""
Persisted records: uploaded HCP profiles and generated videos.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from contentcraft.models.status import ComplianceStatus, Segment


def new_record_id() -> str:
    return uuid.uuid4().hex


def _now() -> str:
    return datetime.now().isoformat()


@dataclass
class Upload:
    """An HCP profile submitted by a user. Never modified after creation."""
    hcp_text: str
    user_id: str
    document_path: Optional[str] = None
    id: str = field(default_factory=new_record_id)
    created_at: str = field(default_factory=_now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "hcp_text": self.hcp_text,
            "document_path": self.document_path,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Upload":
        return cls(
            id=data["id"],
            user_id=data.get("user_id", ""),
            hcp_text=data.get("hcp_text", ""),
            document_path=data.get("document_path"),
            created_at=data.get("created_at", _now()),
        )


@dataclass
class Video:
    """A generated video and the metadata of the run that produced it.

    compliance_details holds the evaluator verdict:
    {passed, score, issues, recommendations, evaluator, approved_manually}
    """
    title: str
    upload_id: str
    prompt: str
    target_hcp: str
    video_url: str
    duration_seconds: int
    compliance_status: ComplianceStatus
    compliance_details: Dict[str, Any] = field(default_factory=dict)
    thumbnail_url: Optional[str] = None
    meditag_segment: Optional[Segment] = None
    segment_confidence: Optional[float] = None
    generated_script: Optional[str] = None
    provider_video_id: Optional[str] = None
    degraded: bool = False
    warnings: List[str] = field(default_factory=list)
    id: str = field(default_factory=new_record_id)
    created_at: str = field(default_factory=_now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "upload_id": self.upload_id,
            "prompt": self.prompt,
            "target_hcp": self.target_hcp,
            "video_url": self.video_url,
            "thumbnail_url": self.thumbnail_url,
            "duration_seconds": self.duration_seconds,
            "compliance_status": self.compliance_status.value,
            "compliance_details": self.compliance_details,
            "meditag_segment": self.meditag_segment.value if self.meditag_segment else None,
            "segment_confidence": self.segment_confidence,
            "generated_script": self.generated_script,
            "provider_video_id": self.provider_video_id,
            "degraded": self.degraded,
            "warnings": list(self.warnings),
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Video":
        segment = data.get("meditag_segment")
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            upload_id=data.get("upload_id", ""),
            prompt=data.get("prompt", ""),
            target_hcp=data.get("target_hcp", ""),
            video_url=data.get("video_url", ""),
            thumbnail_url=data.get("thumbnail_url"),
            duration_seconds=int(data.get("duration_seconds", 0)),
            compliance_status=ComplianceStatus(data.get("compliance_status", ComplianceStatus.REVIEW.value)),
            compliance_details=data.get("compliance_details") or {},
            meditag_segment=Segment(segment) if segment else None,
            segment_confidence=data.get("segment_confidence"),
            generated_script=data.get("generated_script"),
            provider_video_id=data.get("provider_video_id"),
            degraded=bool(data.get("degraded", False)),
            warnings=list(data.get("warnings") or []),
            created_at=data.get("created_at", _now()),
        )
