"""
Tests for the HeyGen provider

Requests are served by httpx.MockTransport routing on the request path.
"""

import json

import httpx
import pytest

from contentcraft.core import ProviderErrorKind, VideoProviderError
from contentcraft.services.pipeline.video_synthesis import HeyGenProvider, ResolutionState
from contentcraft.services.pipeline.video_synthesis.presenters import DEFAULT_HEYGEN_AVATAR

BASE_URL = "https://heygen.test"


def make_provider(routes, api_key="hg-key"):
    """routes maps a request path to a Response (or a callable returning one)"""
    seen = []

    def handler(request):
        seen.append(request)
        reply = routes.get(request.url.path)
        if reply is None:
            return httpx.Response(404, json={"message": "not found"})
        return reply(request) if callable(reply) else reply

    provider = HeyGenProvider(api_key=api_key, base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return provider, seen


class TestPresenters:

    def test_known_and_case_insensitive(self):
        provider = HeyGenProvider(api_key="k")
        assert provider.presenter_for("Cardiologist") == "Anna-headshot-20240205"
        assert provider.presenter_for("oncologist") == "Dave-headshot-20240205"

    def test_unknown_uses_default(self):
        provider = HeyGenProvider(api_key="k")
        assert provider.presenter_for("Healthcare Professional") == DEFAULT_HEYGEN_AVATAR
        assert provider.presenter_for(None) == DEFAULT_HEYGEN_AVATAR


class TestSubmit:

    @pytest.mark.asyncio
    async def test_v2_success(self):
        provider, seen = make_provider({
            "/v2/video/generate": httpx.Response(200, json={"data": {"video_id": "vid-1"}}),
        })
        receipt = await provider.submit("Narration", "Anna-headshot-20240205")

        assert receipt.job_id == "vid-1"
        assert receipt.media_url is None
        request = seen[0]
        assert request.headers["X-Api-Key"] == "hg-key"
        body = json.loads(request.content)
        assert body["video_inputs"][0]["character"]["avatar_id"] == "Anna-headshot-20240205"
        assert body["video_inputs"][0]["voice"]["input_text"] == "Narration"

    @pytest.mark.asyncio
    async def test_falls_through_to_v1(self):
        provider, seen = make_provider({
            "/v2/video/generate": httpx.Response(500, text="internal"),
            "/v1/video_speech.generate": httpx.Response(200, json={"status": "success", "data": {"task_id": "task-9"}}),
        })
        receipt = await provider.submit("Narration", "avatar")

        assert receipt.job_id == "task-9"
        assert [r.url.path for r in seen] == ["/v2/video/generate", "/v1/video_speech.generate"]
        assert json.loads(seen[1].content)["clips"][0]["input_text"] == "Narration"

    @pytest.mark.asyncio
    async def test_v2_without_video_id_falls_through(self):
        provider, _ = make_provider({
            "/v2/video/generate": httpx.Response(200, json={"data": {}}),
            "/v1/video_speech.generate": httpx.Response(200, json={"status": "success", "data": {"task_id": "t"}}),
        })
        assert (await provider.submit("n", "a")).job_id == "t"

    @pytest.mark.asyncio
    async def test_all_attempts_fail_with_last_kind(self):
        provider, _ = make_provider({
            "/v2/video/generate": httpx.Response(500, text="internal"),
            "/v1/video_speech.generate": httpx.Response(429, text="quota"),
        })
        with pytest.raises(VideoProviderError) as exc_info:
            await provider.submit("n", "a")
        assert exc_info.value.kind == ProviderErrorKind.QUOTA
        assert "v2/video/generate" in str(exc_info.value)
        assert "v1/video_speech.generate" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_v1_unsuccessful_status(self):
        provider, _ = make_provider({
            "/v2/video/generate": httpx.Response(401, text="bad key"),
            "/v1/video_speech.generate": httpx.Response(200, json={"status": "fail", "message": "bad avatar"}),
        })
        with pytest.raises(VideoProviderError) as exc_info:
            await provider.submit("n", "a")
        assert exc_info.value.kind == ProviderErrorKind.RESPONSE
        assert "bad avatar" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_missing_key_is_auth_error_without_request(self):
        provider, seen = make_provider({}, api_key=None)
        with pytest.raises(VideoProviderError) as exc_info:
            await provider.submit("n", "a")
        assert exc_info.value.kind == ProviderErrorKind.AUTH
        assert seen == []


class TestResolve:

    @pytest.mark.asyncio
    async def test_video_status_completed(self):
        provider, seen = make_provider({
            "/v1/video_status.get": httpx.Response(
                200, json={"data": {"status": "completed", "video_url": "https://cdn/v.mp4"}}
            ),
        })
        status = await provider.resolve("vid-1")
        assert status.state == ResolutionState.COMPLETED
        assert status.media_url == "https://cdn/v.mp4"
        assert seen[0].url.params["video_id"] == "vid-1"

    @pytest.mark.asyncio
    async def test_video_status_pending_and_failed(self):
        provider, _ = make_provider({
            "/v1/video_status.get": httpx.Response(200, json={"data": {"status": "processing"}}),
        })
        assert (await provider.resolve("v")).state == ResolutionState.PENDING

        provider, _ = make_provider({
            "/v1/video_status.get": httpx.Response(200, json={"data": {"status": "failed", "error": "bad"}}),
        })
        status = await provider.resolve("v")
        assert status.state == ResolutionState.FAILED
        assert status.detail == "bad"

    @pytest.mark.asyncio
    async def test_falls_through_to_task_status(self):
        provider, seen = make_provider({
            "/v1/video_status.get": httpx.Response(404, json={"message": "unknown video"}),
            "/v1/task_status.get": httpx.Response(200, json={"data": {"result": {"url": "https://cdn/t.mp4"}}}),
        })
        status = await provider.resolve("task-9")
        assert status.media_url == "https://cdn/t.mp4"
        assert seen[1].url.params["task_id"] == "task-9"

    @pytest.mark.asyncio
    async def test_both_status_endpoints_fail(self):
        provider, _ = make_provider({
            "/v1/video_status.get": httpx.Response(200, json={"code": 100}),
            "/v1/task_status.get": httpx.Response(200, json={"data": {}}),
        })
        with pytest.raises(VideoProviderError) as exc_info:
            await provider.resolve("x")
        assert exc_info.value.kind == ProviderErrorKind.RESPONSE

    @pytest.mark.asyncio
    async def test_non_string_urls_are_response_errors(self):
        provider, seen = make_provider({
            "/v1/video_status.get": httpx.Response(200, json={"data": {"status": "completed", "video_url": 12345}}),
            "/v1/task_status.get": httpx.Response(200, json={"data": {"result": {"url": ["https://cdn/t.mp4"]}}}),
        })
        with pytest.raises(VideoProviderError) as exc_info:
            await provider.resolve("x")
        assert exc_info.value.kind == ProviderErrorKind.RESPONSE
        assert [r.url.path for r in seen] == ["/v1/video_status.get", "/v1/task_status.get"]

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        def refuse(request):
            raise httpx.ConnectError("refused", request=request)

        provider, _ = make_provider({"/v1/video_status.get": refuse, "/v1/task_status.get": refuse})
        with pytest.raises(VideoProviderError) as exc_info:
            await provider.resolve("x")
        assert exc_info.value.kind == ProviderErrorKind.TRANSPORT
