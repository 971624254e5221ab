"""
Conversions from stored records to API response models
"""

from contentcraft.models import ComplianceDetails, UploadResponse, VideoResponse
from contentcraft.services.infrastructure.storage import Upload, Video


def upload_response(upload: Upload, message: str = "Upload saved") -> UploadResponse:
    return UploadResponse(
        id=upload.id,
        user_id=upload.user_id,
        hcp_text=upload.hcp_text,
        document_path=upload.document_path,
        created_at=upload.created_at,
        message=message,
    )


def video_response(video: Video) -> VideoResponse:
    return VideoResponse(
        id=video.id,
        title=video.title,
        upload_id=video.upload_id,
        prompt=video.prompt,
        target_hcp=video.target_hcp,
        video_url=video.video_url,
        thumbnail_url=video.thumbnail_url,
        duration_seconds=video.duration_seconds,
        compliance_status=video.compliance_status,
        compliance_details=ComplianceDetails(**video.compliance_details),
        meditag_segment=video.meditag_segment,
        segment_confidence=video.segment_confidence,
        generated_script=video.generated_script,
        provider_video_id=video.provider_video_id,
        degraded=video.degraded,
        warnings=video.warnings,
        created_at=video.created_at,
    )
