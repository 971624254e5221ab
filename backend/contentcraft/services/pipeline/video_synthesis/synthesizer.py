"""
Video Synthesizer

Turns a narration into a video URL through the configured provider. A
video is always produced: any provider failure, including a render that
does not finish within the poll timeout, yields the placeholder asset and
a soft-failure marker instead of an error.
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

import httpx

from contentcraft.config import VideoSynthesisSettings
from contentcraft.core import ProviderErrorKind, VideoProviderError, LogTimer, get_logger
from ..contracts import ProviderSoftFailure
from .base import ResolutionState, VideoSynthesisProvider
from .thumbnails import ExtensionSwapThumbnail, ThumbnailStrategy

logger = get_logger(__name__, component="video_synthesizer")


@dataclass(frozen=True)
class SynthesisResult:
    video_url: str
    thumbnail_url: Optional[str]
    provider_video_id: str
    presenter_id: str
    soft_failure: Optional[ProviderSoftFailure] = None

    @property
    def is_placeholder(self) -> bool:
        return self.soft_failure is not None


class VideoSynthesizer:

    COMPONENT = "video_synthesis"

    def __init__(
        self,
        provider: VideoSynthesisProvider,
        settings: Optional[VideoSynthesisSettings] = None,
        thumbnail_strategy: Optional[ThumbnailStrategy] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.provider = provider
        self.settings = settings or VideoSynthesisSettings.from_env()
        self.thumbnail_strategy = thumbnail_strategy or ExtensionSwapThumbnail()
        self._sleep = sleep

    async def synthesize(self, script: str, target_audience: str) -> SynthesisResult:
        presenter_id = self.provider.presenter_for(target_audience)

        try:
            with LogTimer(logger, f"video:{self.provider.name}"):
                receipt = await self.provider.submit(script, presenter_id)
                media_url = receipt.media_url or await self._await_completion(receipt.job_id)
        except (VideoProviderError, httpx.HTTPError) as e:
            return self._placeholder(presenter_id, e)

        return SynthesisResult(
            video_url=media_url,
            thumbnail_url=self.thumbnail_strategy.derive(media_url),
            provider_video_id=receipt.job_id,
            presenter_id=presenter_id,
        )

    async def _await_completion(self, job_id: str) -> str:
        try:
            return await asyncio.wait_for(self._poll(job_id), timeout=self.settings.poll_timeout_seconds)
        except asyncio.TimeoutError as e:
            raise VideoProviderError(
                f"Render {job_id} did not finish within {self.settings.poll_timeout_seconds:g}s",
                kind=ProviderErrorKind.TIMEOUT,
                provider=self.provider.name,
            ) from e

    async def _poll(self, job_id: str) -> str:
        while True:
            status = await self.provider.resolve(job_id)
            if status.state == ResolutionState.COMPLETED and status.media_url:
                return status.media_url
            if status.state == ResolutionState.FAILED:
                raise VideoProviderError(
                    f"Render {job_id} failed: {status.detail or 'unknown reason'}",
                    kind=ProviderErrorKind.RESPONSE,
                    provider=self.provider.name,
                )
            logger.debug("Render pending", extra={"job_id": job_id, "detail": status.detail})
            await self._sleep(self.settings.poll_interval_seconds)

    def _placeholder(self, presenter_id: str, error: Exception) -> SynthesisResult:
        if isinstance(error, VideoProviderError):
            failure = ProviderSoftFailure.from_error(self.COMPONENT, error)
        else:
            failure = ProviderSoftFailure(self.COMPONENT, ProviderErrorKind.TRANSPORT, str(error))

        logger.warning("Video synthesis degraded to placeholder", extra={
            "provider": self.provider.name,
            "kind": failure.kind.value,
            "error": failure.message,
        })
        return SynthesisResult(
            video_url=self.settings.placeholder_video_url,
            thumbnail_url=self.settings.placeholder_thumbnail_url,
            provider_video_id=self.settings.placeholder_video_id,
            presenter_id=presenter_id,
            soft_failure=failure,
        )
