"""
HCP segmentation
"""

from .profile import HCPProfile, parse_hcp_profile, SPECIALTY_KEYWORDS
from .segmenter import HCPSegmenter, SegmentResult, SEGMENT_REASONING, clamp_confidence

__all__ = [
    "HCPProfile",
    "parse_hcp_profile",
    "SPECIALTY_KEYWORDS",
    "HCPSegmenter",
    "SegmentResult",
    "SEGMENT_REASONING",
    "clamp_confidence",
]
