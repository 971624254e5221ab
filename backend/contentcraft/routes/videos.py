"""
Video routes - generate, browse, delete and approve videos

Provider failures never turn into error responses: a degraded run still
returns 201 with `degraded=true` and a warning explaining what was used
instead.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core import NotFoundError, ScriptGenerationError, ValidationError, get_logger
from ..dependencies import (
    get_approve_compliance_use_case,
    get_delete_video_use_case,
    get_generation_use_case,
    get_list_videos_use_case,
    get_video_use_case,
)
from ..models import (
    GenerationRequest,
    GenerationResponse,
    MessageResponse,
    SoftFailureInfo,
    VideoResponse,
)
from ..services.pipeline import PipelineRequest
from ..services.use_cases import (
    ApproveComplianceUseCase,
    DeleteVideoUseCase,
    GenerationUseCase,
    GetVideoUseCase,
    ListVideosUseCase,
)
from .responses import video_response

router = APIRouter(prefix="/videos", tags=["videos"])
logger = get_logger(__name__, component="videos_route")


@router.post("/generate", response_model=GenerationResponse, status_code=status.HTTP_201_CREATED)
async def generate_video(
    request: GenerationRequest,
    use_case: GenerationUseCase = Depends(get_generation_use_case),
):
    """Run the generation pipeline for one prompt"""
    try:
        outcome = await use_case.execute(PipelineRequest(
            prompt=request.prompt,
            upload_id=request.upload_id,
            hcp_text=request.hcp_text,
            user_id=request.user_id,
        ))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ScriptGenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))

    video = outcome.video
    return GenerationResponse(
        id=video.id,
        title=video.title,
        status=video.compliance_status,
        message=outcome.message,
        degraded=outcome.degraded,
        warning=outcome.warning,
        soft_failures=[SoftFailureInfo(**failure.to_dict()) for failure in outcome.soft_failures],
        video=video_response(video),
    )


@router.get("", response_model=List[VideoResponse])
async def list_videos(
    limit: Optional[int] = Query(default=None, ge=1),
    use_case: ListVideosUseCase = Depends(get_list_videos_use_case),
):
    """List videos, newest first"""
    return [video_response(video) for video in await use_case.execute(limit)]


@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(video_id: str, use_case: GetVideoUseCase = Depends(get_video_use_case)):
    try:
        return video_response(await use_case.execute(video_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{video_id}", response_model=MessageResponse)
async def delete_video(video_id: str, use_case: DeleteVideoUseCase = Depends(get_delete_video_use_case)):
    if not await use_case.execute(video_id):
        raise HTTPException(status_code=404, detail=f"Video with ID {video_id} not found")
    return MessageResponse(message="Video deleted successfully")


@router.post("/{video_id}/approve-compliance", response_model=VideoResponse)
async def approve_compliance(
    video_id: str,
    use_case: ApproveComplianceUseCase = Depends(get_approve_compliance_use_case),
):
    """Manually approve a video under Review or Failed"""
    try:
        return video_response(await use_case.execute(video_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
