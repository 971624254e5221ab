"""
Ordered attempt strategies

Providers with several API generations (e.g. a v2 endpoint with a v1
fallback) express each call as a list of attempts tried in order.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, List, Sequence, TypeVar

from contentcraft.core import ProviderErrorKind, VideoProviderError, get_logger

logger = get_logger(__name__, component="video_attempts")

T = TypeVar("T")


@dataclass(frozen=True)
class Attempt(Generic[T]):
    name: str
    call: Callable[[], Awaitable[T]]


async def run_attempts(attempts: Sequence[Attempt[T]], provider: str = "video") -> T:
    """Run attempts in order and return the first success.

    Raises:
        ValueError: If no attempts are given
        VideoProviderError: When every attempt failed; the message lists
            each failure and the kind is that of the last failure
    """
    if not attempts:
        raise ValueError("run_attempts requires at least one attempt")

    failures: List[str] = []
    last_kind = ProviderErrorKind.TRANSPORT

    for attempt in attempts:
        try:
            return await attempt.call()
        except VideoProviderError as e:
            failures.append(f"{attempt.name}: {e}")
            last_kind = e.kind
            logger.info("Provider attempt failed", extra={
                "provider": provider,
                "attempt": attempt.name,
                "kind": e.kind.value,
                "error": str(e),
            })

    raise VideoProviderError(
        "All attempts failed (" + "; ".join(failures) + ")",
        kind=last_kind,
        provider=provider,
    )
