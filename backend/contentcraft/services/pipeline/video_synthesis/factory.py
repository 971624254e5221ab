"""
Video provider factory

The active provider comes from configuration (VIDEO_PROVIDER), never from
request content.
"""

from typing import Optional

import httpx

from contentcraft.config import VideoProviderType, VideoSynthesisSettings
from .base import VideoSynthesisProvider
from .heygen import HeyGenProvider
from .veo import VeoProvider


def create_video_provider(
    settings: Optional[VideoSynthesisSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> VideoSynthesisProvider:
    settings = settings or VideoSynthesisSettings.from_env()

    if settings.provider == VideoProviderType.VEO:
        return VeoProvider(
            api_key=settings.veo_api_key,
            base_url=settings.veo_base_url,
            timeout=settings.request_timeout_seconds,
            transport=transport,
        )

    return HeyGenProvider(
        api_key=settings.heygen_api_key,
        base_url=settings.heygen_base_url,
        timeout=settings.request_timeout_seconds,
        transport=transport,
    )
