"""
Video generation pipeline

Components (each usable on its own):
    segmentation/     HCP profile parsing and segment rules
    script_drafting/  LLM narration drafting
    compliance/       rubric review with heuristic fallback
    video_synthesis/  avatar video providers and placeholder fallback
    orchestrator.py   the linear run over all of the above
"""

from .contracts import ProviderSoftFailure
from .orchestrator import (
    VideoPipeline,
    PipelineRequest,
    PipelineResult,
    derive_video_title,
    validate_request,
)

__all__ = [
    "ProviderSoftFailure",
    "VideoPipeline",
    "PipelineRequest",
    "PipelineResult",
    "derive_video_title",
    "validate_request",
]
