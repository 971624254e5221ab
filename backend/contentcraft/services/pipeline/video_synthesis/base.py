"""
Video synthesis provider interface

Providers are asynchronous render services: `submit` starts a render and
returns a job id (or, for some providers, a finished URL straight away);
`resolve` reports the job state. Each provider maps target audiences to
its own presenter identities.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

import httpx

from contentcraft.core import ProviderErrorKind, VideoProviderError, get_logger

logger = get_logger(__name__, component="video_provider")


@dataclass(frozen=True)
class SubmissionReceipt:
    job_id: str
    media_url: Optional[str] = None  # Set when the provider returns a usable URL immediately


class ResolutionState(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class ResolutionStatus:
    state: ResolutionState
    media_url: Optional[str] = None
    detail: Optional[str] = None


def error_kind_for_status(status_code: int) -> ProviderErrorKind:
    if status_code in (401, 403):
        return ProviderErrorKind.AUTH
    if status_code in (402, 429):
        return ProviderErrorKind.QUOTA
    if status_code in (408, 504):
        return ProviderErrorKind.TIMEOUT
    return ProviderErrorKind.RESPONSE


def lookup_presenter(table: Dict[str, str], default: str, target_audience: Optional[str]) -> str:
    """Exact label match first, then a case-insensitive one, else the default"""
    if not target_audience:
        return default
    label = target_audience.strip()
    if label in table:
        return table[label]
    lowered = label.lower()
    for key, presenter in table.items():
        if key.lower() == lowered:
            return presenter
    return default


class VideoSynthesisProvider(ABC):
    """Capability interface implemented by every video provider"""

    name: str = "video"
    presenters: Dict[str, str] = {}
    default_presenter: str = ""

    def presenter_for(self, target_audience: Optional[str]) -> str:
        return lookup_presenter(self.presenters, self.default_presenter, target_audience)

    @abstractmethod
    async def submit(self, narration: str, presenter_id: str) -> SubmissionReceipt:
        """Start a render.

        Raises:
            VideoProviderError: auth, quota, transport or response failure
        """
        pass

    @abstractmethod
    async def resolve(self, job_id: str) -> ResolutionStatus:
        """Report the state of a render.

        Raises:
            VideoProviderError: auth, quota, transport or response failure
        """
        pass


class HttpVideoProvider(VideoSynthesisProvider):
    """Shared JSON-over-HTTP plumbing with error classification"""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    def _require_api_key(self) -> str:
        if not self.api_key:
            raise VideoProviderError(
                f"{self.name} API key is not configured",
                kind=ProviderErrorKind.AUTH,
                provider=self.name,
            )
        return self.api_key

    def _media_url(self, value: Any, source: str) -> Optional[str]:
        """Return a URL field as a string, or None when it is absent or blank.

        Raises:
            VideoProviderError: If the field is present but not a string
        """
        if value is None:
            return None
        if not isinstance(value, str):
            raise VideoProviderError(
                f"{source} returned a non-string url", kind=ProviderErrorKind.RESPONSE, provider=self.name
            )
        return value.strip() or None

    def _headers(self) -> Dict[str, str]:
        raise NotImplementedError

    def _describe_error(self, response: httpx.Response) -> VideoProviderError:
        return VideoProviderError(
            f"{self.name} returned HTTP {response.status_code}: {response.text[:200]}",
            kind=error_kind_for_status(response.status_code),
            provider=self.name,
        )

    async def _request_json(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        """Send a request and return the JSON object body.

        Raises:
            VideoProviderError: On transport failure, error status or a non-object body
        """
        headers = self._headers()
        url = f"{self.base_url}/{path.lstrip('/')}" if path else f"{self.base_url}/"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, headers=headers, **kwargs)
        except httpx.TimeoutException as e:
            raise VideoProviderError(
                f"{self.name} request timed out", kind=ProviderErrorKind.TIMEOUT, provider=self.name
            ) from e
        except httpx.HTTPError as e:
            raise VideoProviderError(
                f"{self.name} request failed: {e}", kind=ProviderErrorKind.TRANSPORT, provider=self.name
            ) from e

        if response.is_error:
            raise self._describe_error(response)

        try:
            data = response.json()
        except ValueError as e:
            raise VideoProviderError(
                f"{self.name} returned a non-JSON body", kind=ProviderErrorKind.RESPONSE, provider=self.name
            ) from e

        if not isinstance(data, dict):
            raise VideoProviderError(
                f"{self.name} returned an unexpected body", kind=ProviderErrorKind.RESPONSE, provider=self.name
            )
        return data


def nested(data: Dict[str, Any], *keys: str) -> Any:
    """Walk nested dicts, returning None at the first missing level"""
    current: Any = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current
