"""
Video library use cases - browse, delete and approve generated videos,
and summarise compliance across the library.
"""

import asyncio
from dataclasses import dataclass
from typing import List, Optional

from contentcraft.core import NotFoundError, get_logger
from contentcraft.models.status import ComplianceStatus
from contentcraft.services.infrastructure.storage import Video, VideoRepository
from .base import UseCase

logger = get_logger(__name__, component="video_library")


@dataclass(frozen=True)
class ComplianceStats:
    total_videos: int
    passed: int
    review: int
    failed: int
    pass_rate: float
    average_duration_seconds: float


def compute_compliance_stats(videos: List[Video]) -> ComplianceStats:
    """Summarise a set of videos; an empty set yields all zeros"""
    total = len(videos)
    if total == 0:
        return ComplianceStats(0, 0, 0, 0, 0.0, 0.0)

    counts = {status: 0 for status in ComplianceStatus}
    for video in videos:
        counts[video.compliance_status] += 1

    passed = counts[ComplianceStatus.PASSED]
    return ComplianceStats(
        total_videos=total,
        passed=passed,
        review=counts[ComplianceStatus.REVIEW],
        failed=counts[ComplianceStatus.FAILED],
        pass_rate=float(round(passed / total * 100)),
        average_duration_seconds=round(sum(v.duration_seconds for v in videos) / total, 1),
    )


class GetVideoUseCase(UseCase[str, Video]):

    def __init__(self, video_repository: VideoRepository):
        self.video_repository = video_repository

    async def execute(self, request: str) -> Video:
        video = await asyncio.to_thread(self.video_repository.get, request)
        if video is None:
            raise NotFoundError("Video", request)
        return video


class ListVideosUseCase(UseCase[Optional[int], List[Video]]):

    def __init__(self, video_repository: VideoRepository):
        self.video_repository = video_repository

    async def execute(self, request: Optional[int] = None) -> List[Video]:
        return await asyncio.to_thread(self.video_repository.list, request)


class DeleteVideoUseCase(UseCase[str, bool]):
    """Returns False for an unknown id rather than raising"""

    def __init__(self, video_repository: VideoRepository):
        self.video_repository = video_repository

    async def execute(self, request: str) -> bool:
        return await asyncio.to_thread(self.video_repository.delete, request)


class ApproveComplianceUseCase(UseCase[str, Video]):
    """Manual approval moves a Review or Failed video to Passed"""

    def __init__(self, video_repository: VideoRepository):
        self.video_repository = video_repository

    async def execute(self, request: str) -> Video:
        video = await asyncio.to_thread(self.video_repository.get, request)
        if video is None:
            raise NotFoundError("Video", request)
        if not video.compliance_status.can_be_approved():
            return video

        updated = await asyncio.to_thread(
            self.video_repository.update_compliance_status, request, ComplianceStatus.PASSED
        )
        if updated is None:
            raise NotFoundError("Video", request)
        logger.info("Compliance approved manually", extra={
            "video_id": request,
            "previous_status": video.compliance_status.value,
        })
        return updated


class ComplianceStatsUseCase(UseCase[None, ComplianceStats]):

    def __init__(self, video_repository: VideoRepository):
        self.video_repository = video_repository

    async def execute(self, request: None = None) -> ComplianceStats:
        videos = await asyncio.to_thread(self.video_repository.list, None)
        return compute_compliance_stats(videos)
