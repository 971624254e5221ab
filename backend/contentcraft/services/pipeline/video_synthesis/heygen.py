"""
HeyGen avatar video provider

Submission tries the v2 generate endpoint first and the v1 speech endpoint
second. Status is read from video_status.get, then task_status.get, since
a v1 submission yields a task id rather than a video id.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from contentcraft.core import ProviderErrorKind, VideoProviderError
from .attempts import Attempt, run_attempts
from .base import (
    HttpVideoProvider,
    ResolutionState,
    ResolutionStatus,
    SubmissionReceipt,
    nested,
)
from .presenters import HEYGEN_AVATARS, DEFAULT_HEYGEN_AVATAR

V2_VOICE_ID = "1bd001e7e50f421d891986aad5158bc8"
V1_VOICE_ID = "en-US-GuyD"

_FAILED_STATES = {"failed", "error"}


def build_v2_payload(narration: str, avatar_id: str) -> Dict[str, Any]:
    return {
        "video_inputs": [
            {
                "character": {
                    "type": "avatar",
                    "avatar_id": avatar_id,
                    "avatar_style": "normal",
                },
                "voice": {
                    "type": "text",
                    "input_text": narration,
                    "voice_id": V2_VOICE_ID,
                    "speed": 1.0,
                },
            }
        ],
        "dimension": {"width": 1280, "height": 720},
    }


def build_v1_payload(narration: str, avatar_id: str) -> Dict[str, Any]:
    return {
        "background": {"type": "color", "value": "#ffffff"},
        "clips": [
            {
                "avatar_id": avatar_id,
                "avatar_style": "closeup",
                "input_text": narration,
                "voice_id": V1_VOICE_ID,
                "voice_settings": {"stability": 0.7, "similarity": 0.8},
            }
        ],
        "ratio": "16:9",
        "test": False,
        "version": "v1",
    }


class HeyGenProvider(HttpVideoProvider):

    name = "heygen"
    presenters = HEYGEN_AVATARS
    default_presenter = DEFAULT_HEYGEN_AVATAR

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.heygen.com",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(base_url=base_url, api_key=api_key, timeout=timeout, transport=transport)

    def _headers(self) -> Dict[str, str]:
        return {
            "X-Api-Key": self._require_api_key(),
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _response_error(self, message: str) -> VideoProviderError:
        return VideoProviderError(message, kind=ProviderErrorKind.RESPONSE, provider=self.name)

    # -- submission --------------------------------------------------------

    async def _submit_v2(self, narration: str, avatar_id: str) -> SubmissionReceipt:
        data = await self._request_json("POST", "v2/video/generate", json=build_v2_payload(narration, avatar_id))
        video_id = nested(data, "data", "video_id")
        if not video_id:
            raise self._response_error("v2 generate returned no video_id")
        return SubmissionReceipt(job_id=str(video_id))

    async def _submit_v1(self, narration: str, avatar_id: str) -> SubmissionReceipt:
        data = await self._request_json(
            "POST", "v1/video_speech.generate", json=build_v1_payload(narration, avatar_id)
        )
        task_id = nested(data, "data", "task_id")
        if data.get("status") != "success" or not task_id:
            raise self._response_error(f"v1 generate failed: {data.get('message') or 'Unknown error'}")
        return SubmissionReceipt(job_id=str(task_id))

    async def submit(self, narration: str, presenter_id: str) -> SubmissionReceipt:
        self._require_api_key()
        return await run_attempts([
            Attempt("v2/video/generate", lambda: self._submit_v2(narration, presenter_id)),
            Attempt("v1/video_speech.generate", lambda: self._submit_v1(narration, presenter_id)),
        ], provider=self.name)

    # -- status ------------------------------------------------------------

    async def _video_status(self, job_id: str) -> ResolutionStatus:
        data = await self._request_json("GET", f"v1/video_status.get?video_id={quote(job_id)}")
        payload = data.get("data")
        if not isinstance(payload, dict):
            raise self._response_error("video_status.get returned no data")
        url = self._media_url(payload.get("video_url"), "video_status.get")
        if url:
            return ResolutionStatus(ResolutionState.COMPLETED, media_url=url)
        status = str(payload.get("status") or "").lower()
        if status in _FAILED_STATES:
            return ResolutionStatus(ResolutionState.FAILED, detail=str(payload.get("error") or status))
        if status:
            return ResolutionStatus(ResolutionState.PENDING, detail=status)
        raise self._response_error("video_status.get returned no video_url")

    async def _task_status(self, job_id: str) -> ResolutionStatus:
        data = await self._request_json("GET", f"v1/task_status.get?task_id={quote(job_id)}")
        url = self._media_url(nested(data, "data", "result", "url"), "task_status.get")
        if url:
            return ResolutionStatus(ResolutionState.COMPLETED, media_url=url)
        status = str(nested(data, "data", "status") or "").lower()
        if status in _FAILED_STATES:
            return ResolutionStatus(ResolutionState.FAILED, detail=status)
        if status:
            return ResolutionStatus(ResolutionState.PENDING, detail=status)
        raise self._response_error("task_status.get returned no result url")

    async def resolve(self, job_id: str) -> ResolutionStatus:
        return await run_attempts([
            Attempt("v1/video_status.get", lambda: self._video_status(job_id)),
            Attempt("v1/task_status.get", lambda: self._task_status(job_id)),
        ], provider=self.name)
