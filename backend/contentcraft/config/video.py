"""
Video synthesis configuration

Selects the avatar video provider and controls how long the synthesizer
waits for a render before falling back to placeholder media.

Set VIDEO_PROVIDER to switch providers:
    - "heygen" : HeyGen avatar API (requires HEYGEN_API_KEY)
    - "veo"    : VEO video API (requires VEO_API_KEY)
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .env import env_float


class VideoProviderType(str, Enum):
    """Supported video synthesis providers"""
    HEYGEN = "heygen"
    VEO = "veo"


PLACEHOLDER_VIDEO_URL = (
    "https://assets.mixkit.co/videos/preview/mixkit-medical-team-in-a-hospital-room-31695-large.mp4"
)
PLACEHOLDER_THUMBNAIL_URL = (
    "https://assets.mixkit.co/videos/preview/mixkit-medical-team-in-a-hospital-room-31695-large.jpg"
)
PLACEHOLDER_VIDEO_ID = "simulated-video-id"


def get_active_video_provider() -> VideoProviderType:
    """Get the configured video provider, defaulting to HeyGen"""
    value = os.getenv("VIDEO_PROVIDER", "").strip().lower()
    if value == VideoProviderType.VEO.value:
        return VideoProviderType.VEO
    return VideoProviderType.HEYGEN


@dataclass
class VideoSynthesisSettings:
    """Runtime settings for video synthesis"""
    provider: VideoProviderType = VideoProviderType.HEYGEN
    heygen_api_key: Optional[str] = None
    heygen_base_url: str = "https://api.heygen.com"
    veo_api_key: Optional[str] = None
    veo_base_url: str = "https://veo2api.com/api"
    request_timeout_seconds: float = 30.0
    poll_interval_seconds: float = 5.0
    poll_timeout_seconds: float = 120.0
    placeholder_video_url: str = PLACEHOLDER_VIDEO_URL
    placeholder_thumbnail_url: str = PLACEHOLDER_THUMBNAIL_URL
    placeholder_video_id: str = PLACEHOLDER_VIDEO_ID

    @classmethod
    def from_env(cls) -> "VideoSynthesisSettings":
        return cls(
            provider=get_active_video_provider(),
            heygen_api_key=os.getenv("HEYGEN_API_KEY") or None,
            heygen_base_url=os.getenv("HEYGEN_BASE_URL", "https://api.heygen.com").rstrip("/"),
            veo_api_key=os.getenv("VEO_API_KEY") or None,
            veo_base_url=os.getenv("VEO_BASE_URL", "https://veo2api.com/api").rstrip("/"),
            request_timeout_seconds=env_float("VIDEO_REQUEST_TIMEOUT_SECONDS", 30.0, 1.0),
            poll_interval_seconds=env_float("VIDEO_POLL_INTERVAL_SECONDS", 5.0, 0.0),
            poll_timeout_seconds=env_float("VIDEO_POLL_TIMEOUT_SECONDS", 120.0, 1.0),
        )
