"""
VEO video provider

Single submission endpoint authenticated with a bearer token; renders are
resolved by polling videos/{id}.
"""

from typing import Dict, Optional

import httpx

from contentcraft.core import ProviderErrorKind, VideoProviderError
from .base import (
    HttpVideoProvider,
    ResolutionState,
    ResolutionStatus,
    SubmissionReceipt,
)
from .presenters import VEO_SPEAKERS, DEFAULT_VEO_SPEAKER

INSUFFICIENT_CREDITS = "Insufficient credits"


class VeoProvider(HttpVideoProvider):

    name = "veo"
    presenters = VEO_SPEAKERS
    default_presenter = DEFAULT_VEO_SPEAKER

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://veo2api.com/api",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(base_url=base_url, api_key=api_key, timeout=timeout, transport=transport)

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._require_api_key()}",
            "Content-Type": "application/json",
        }

    def _describe_error(self, response: httpx.Response) -> VideoProviderError:
        if response.status_code == 402:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and body.get("error") == INSUFFICIENT_CREDITS:
                return VideoProviderError(
                    "VEO API Error: Insufficient credits. Please top up your account.",
                    kind=ProviderErrorKind.QUOTA,
                    provider=self.name,
                )
        return super()._describe_error(response)

    async def submit(self, narration: str, presenter_id: str) -> SubmissionReceipt:
        data = await self._request_json("POST", "", json={"prompt": narration, "speaker": presenter_id})
        video_id = data.get("id")
        if not video_id:
            raise VideoProviderError(
                "VEO submission returned no id", kind=ProviderErrorKind.RESPONSE, provider=self.name
            )
        # Some responses are already complete
        url = self._media_url(data.get("url"), "VEO submission") if data.get("status") == "completed" else None
        return SubmissionReceipt(job_id=str(video_id), media_url=url)

    async def resolve(self, job_id: str) -> ResolutionStatus:
        data = await self._request_json("GET", f"videos/{job_id}")
        status = str(data.get("status") or "").lower()
        if status == "completed":
            url = self._media_url(data.get("url"), "VEO status")
            if not url:
                raise VideoProviderError(
                    "VEO render completed without a url", kind=ProviderErrorKind.RESPONSE, provider=self.name
                )
            return ResolutionStatus(ResolutionState.COMPLETED, media_url=url)
        if status in ("failed", "error"):
            return ResolutionStatus(ResolutionState.FAILED, detail=str(data.get("error") or status))
        return ResolutionStatus(ResolutionState.PENDING, detail=status or None)
