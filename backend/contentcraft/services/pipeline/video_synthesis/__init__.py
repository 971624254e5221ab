"""
Avatar video synthesis
"""

from .base import (
    VideoSynthesisProvider,
    HttpVideoProvider,
    SubmissionReceipt,
    ResolutionState,
    ResolutionStatus,
    lookup_presenter,
)
from .attempts import Attempt, run_attempts
from .heygen import HeyGenProvider
from .veo import VeoProvider
from .thumbnails import ThumbnailStrategy, ExtensionSwapThumbnail
from .synthesizer import VideoSynthesizer, SynthesisResult
from .factory import create_video_provider

__all__ = [
    "VideoSynthesisProvider",
    "HttpVideoProvider",
    "SubmissionReceipt",
    "ResolutionState",
    "ResolutionStatus",
    "lookup_presenter",
    "Attempt",
    "run_attempts",
    "HeyGenProvider",
    "VeoProvider",
    "ThumbnailStrategy",
    "ExtensionSwapThumbnail",
    "VideoSynthesizer",
    "SynthesisResult",
    "create_video_provider",
]
