"""
HCP segmentation (MediTag)

Rule-based classification of an HCP profile into a marketing-behaviour
segment. Prescription rate is the primary signal; years of experience is
used only when no rate is known. Specialty then nudges the confidence.
"""

from dataclasses import dataclass
from typing import Dict

from contentcraft.core import get_logger
from contentcraft.models.status import Segment
from .profile import HCPProfile, parse_hcp_profile

logger = get_logger(__name__, component="segmenter")

SEGMENT_REASONING: Dict[Segment, str] = {
    Segment.EARLY_ADOPTER: "High prescription rate and/or recent entry to practice",
    Segment.EVIDENCE_DRIVEN: "Significant experience and moderate prescription patterns",
    Segment.MAINSTREAM: "Average prescription rate with balanced approach",
    Segment.CONSERVATIVE: "Lower prescription rate, likely preferring established treatments",
    Segment.GENERAL: "Insufficient data for detailed segmentation",
}


@dataclass(frozen=True)
class SegmentResult:
    segment: Segment
    confidence: float
    reasoning: str
    profile: HCPProfile


def clamp_confidence(value: float) -> float:
    return max(0.0, min(1.0, value))


class HCPSegmenter:
    """Pure segmentation rules. Never raises."""

    def classify(self, profile: HCPProfile) -> SegmentResult:
        rate = profile.prescription_rate
        years = profile.years_experience

        segment = Segment.GENERAL
        confidence = 0.7

        if rate is not None:
            if rate > 0.7:
                segment, confidence = Segment.EARLY_ADOPTER, 0.85
            elif rate > 0.4:
                if years is not None and years > 10:
                    segment, confidence = Segment.EVIDENCE_DRIVEN, 0.9
                else:
                    segment, confidence = Segment.MAINSTREAM, 0.75
            else:
                segment, confidence = Segment.CONSERVATIVE, 0.8
        elif years is not None:
            if years > 15:
                segment, confidence = Segment.EVIDENCE_DRIVEN, 0.7
            elif years < 5:
                segment, confidence = Segment.EARLY_ADOPTER, 0.6

        # Specialty adjustments; callers clamp to [0, 1]
        if profile.specialty == "Oncology":
            confidence += 0.05 if segment == Segment.EVIDENCE_DRIVEN else -0.1
        elif (
            profile.specialty == "Cardiology"
            and (profile.practice_size or "").lower() == "large"
            and segment != Segment.MAINSTREAM
        ):
            confidence -= 0.1

        return SegmentResult(
            segment=segment,
            confidence=round(confidence, 4),
            reasoning=SEGMENT_REASONING[segment],
            profile=profile,
        )

    async def segment(self, hcp_text: str) -> SegmentResult:
        """Parse and classify raw HCP text"""
        result = self.classify(parse_hcp_profile(hcp_text))
        logger.info("HCP segmented", extra={
            "segment": result.segment.value,
            "confidence": result.confidence,
            "specialty": result.profile.specialty,
        })
        return result
