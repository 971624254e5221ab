"""
Video repository - data access for generated videos.

A video is written once per successful pipeline run. The only mutation
afterwards is a compliance-status change (manual approval); explicit
delete is the only way a video goes away.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from contentcraft.config import DATA_DIR
from contentcraft.core import get_logger
from contentcraft.models.status import ComplianceStatus
from .json_store import JsonRecordStore
from .records import Video

logger = get_logger(__name__, component="video_repository")


class VideoRepository(ABC):
    """Abstract repository for videos"""

    @abstractmethod
    def create(self, video: Video) -> Video:
        pass

    @abstractmethod
    def get(self, video_id: str) -> Optional[Video]:
        pass

    @abstractmethod
    def list(self, limit: Optional[int] = None) -> List[Video]:
        """
        List videos, newest first.

        Args:
            limit: Maximum number of videos to return (all when None)
        """
        pass

    @abstractmethod
    def delete(self, video_id: str) -> bool:
        """
        Delete a video.

        Returns:
            True if the video was deleted, False if not found
        """
        pass

    @abstractmethod
    def update_compliance_status(self, video_id: str, status: ComplianceStatus) -> Optional[Video]:
        """Set the compliance status; returns the updated video or None if not found"""
        pass


class FileBasedVideoRepository(VideoRepository):

    def __init__(self, storage_dir: Optional[Path] = None):
        self._store = JsonRecordStore(storage_dir or DATA_DIR / "videos")

    def create(self, video: Video) -> Video:
        self._store.save(video.id, video.to_dict())
        logger.info("Video created", extra={
            "video_id": video.id,
            "upload_id": video.upload_id,
            "compliance_status": video.compliance_status.value,
            "degraded": video.degraded,
        })
        return video

    def get(self, video_id: str) -> Optional[Video]:
        data = self._store.load(video_id)
        return Video.from_dict(data) if data else None

    def list(self, limit: Optional[int] = None) -> List[Video]:
        videos = [Video.from_dict(data) for data in self._store.load_all()]
        videos.sort(key=lambda v: v.created_at, reverse=True)
        if limit is not None:
            videos = videos[:max(limit, 0)]
        return videos

    def delete(self, video_id: str) -> bool:
        deleted = self._store.delete(video_id)
        if deleted:
            logger.info("Video deleted", extra={"video_id": video_id})
        return deleted

    def update_compliance_status(self, video_id: str, status: ComplianceStatus) -> Optional[Video]:
        with self._store.lock:
            video = self.get(video_id)
            if video is None:
                return None
            video.compliance_status = status
            video.compliance_details = {
                **video.compliance_details,
                "approved_manually": status == ComplianceStatus.PASSED,
            }
            self._store.save(video.id, video.to_dict())
        logger.info("Compliance status updated", extra={"video_id": video_id, "compliance_status": status.value})
        return video
