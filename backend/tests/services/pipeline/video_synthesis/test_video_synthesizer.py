"""
Tests for the VideoSynthesizer

Every provider failure, including a poll timeout, ends in placeholder media.
"""

import httpx
import pytest

from contentcraft.config import PLACEHOLDER_THUMBNAIL_URL, PLACEHOLDER_VIDEO_URL, VideoSynthesisSettings
from contentcraft.core import ProviderErrorKind, VideoProviderError
from contentcraft.services.pipeline.video_synthesis import (
    ExtensionSwapThumbnail,
    ResolutionState,
    ResolutionStatus,
    SubmissionReceipt,
    VideoSynthesizer,
)

PENDING = ResolutionStatus(ResolutionState.PENDING, detail="processing")


class TestThumbnails:

    def test_extension_swap(self):
        assert ExtensionSwapThumbnail().derive("https://cdn/a.mp4?x=.mp4") == "https://cdn/a.jpg?x=.mp4"

    def test_no_video_extension(self):
        assert ExtensionSwapThumbnail().derive("https://cdn/stream.m3u8") is None
        assert ExtensionSwapThumbnail().derive("") is None

    def test_non_string_url(self):
        assert ExtensionSwapThumbnail().derive(12345) is None
        assert ExtensionSwapThumbnail().derive(None) is None


class TestVideoSynthesizer:

    @pytest.mark.asyncio
    async def test_polls_until_completed(self, make_video_provider, fast_settings):
        sleeps = []

        async def fake_sleep(seconds):
            sleeps.append(seconds)

        provider = make_video_provider(statuses=[
            PENDING,
            PENDING,
            ResolutionStatus(ResolutionState.COMPLETED, media_url="https://cdn/job-1.mp4"),
        ])
        result = await VideoSynthesizer(provider, fast_settings, sleep=fake_sleep).synthesize("Script", "Cardiologist")

        assert result.video_url == "https://cdn/job-1.mp4"
        assert result.thumbnail_url == "https://cdn/job-1.jpg"
        assert result.provider_video_id == "job-1"
        assert result.presenter_id == "presenter-cardio"
        assert result.is_placeholder is False
        assert provider.submitted == [("Script", "presenter-cardio")]
        assert len(provider.resolved) == 3
        assert len(sleeps) == 2

    @pytest.mark.asyncio
    async def test_direct_url_skips_polling(self, make_video_provider, fast_settings):
        provider = make_video_provider(receipt=SubmissionReceipt(job_id="j", media_url="https://cdn/direct.mp4"))
        result = await VideoSynthesizer(provider, fast_settings).synthesize("Script", "Unknown")

        assert result.video_url == "https://cdn/direct.mp4"
        assert result.presenter_id == "presenter-default"
        assert provider.resolved == []

    @pytest.mark.asyncio
    async def test_submit_failure_uses_placeholder(self, make_video_provider, fast_settings):
        error = VideoProviderError("Insufficient credits", kind=ProviderErrorKind.QUOTA, provider="veo")
        result = await VideoSynthesizer(make_video_provider(receipt=error), fast_settings).synthesize("S", "Cardiologist")

        assert result.video_url == PLACEHOLDER_VIDEO_URL
        assert result.thumbnail_url == PLACEHOLDER_THUMBNAIL_URL
        assert result.provider_video_id == "simulated-video-id"
        assert result.is_placeholder
        assert result.soft_failure.component == "video_synthesis"
        assert result.soft_failure.kind == ProviderErrorKind.QUOTA
        assert "credits" in result.soft_failure.describe()

    @pytest.mark.asyncio
    async def test_failed_render_uses_placeholder(self, make_video_provider, fast_settings):
        provider = make_video_provider(statuses=[ResolutionStatus(ResolutionState.FAILED, detail="bad avatar")])
        result = await VideoSynthesizer(provider, fast_settings).synthesize("S", "Cardiologist")
        assert result.video_url == PLACEHOLDER_VIDEO_URL
        assert result.soft_failure.kind == ProviderErrorKind.RESPONSE

    @pytest.mark.asyncio
    async def test_raw_http_error_uses_placeholder(self, make_video_provider, fast_settings):
        provider = make_video_provider(receipt=httpx.ConnectError("refused"))
        result = await VideoSynthesizer(provider, fast_settings).synthesize("S", "Cardiologist")
        assert result.soft_failure.kind == ProviderErrorKind.TRANSPORT

    @pytest.mark.asyncio
    async def test_poll_timeout_uses_placeholder(self, make_video_provider):
        settings = VideoSynthesisSettings(poll_interval_seconds=0.01, poll_timeout_seconds=0.05)
        provider = make_video_provider(statuses=[PENDING])

        result = await VideoSynthesizer(provider, settings).synthesize("S", "Cardiologist")

        assert result.video_url == PLACEHOLDER_VIDEO_URL
        assert result.soft_failure.kind == ProviderErrorKind.TIMEOUT
        assert len(provider.resolved) >= 1

    @pytest.mark.asyncio
    async def test_custom_thumbnail_strategy(self, make_video_provider, fast_settings):
        class FixedThumbnail(ExtensionSwapThumbnail):
            def derive(self, video_url):
                return "https://cdn/still.png"

        result = await VideoSynthesizer(
            make_video_provider(), fast_settings, thumbnail_strategy=FixedThumbnail()
        ).synthesize("S", "Cardiologist")
        assert result.thumbnail_url == "https://cdn/still.png"
