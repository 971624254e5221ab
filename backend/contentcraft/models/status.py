"""
Status constants and enumerations.

Centralized definitions for compliance status, HCP segments and pipeline
stages to replace magic strings throughout the codebase.
"""

from enum import Enum


class ComplianceStatus(str, Enum):
    """Outcome of the compliance review of a narration script."""

    PASSED = "Passed"
    REVIEW = "Review"
    FAILED = "Failed"

    def can_be_approved(self) -> bool:
        """Manual approval only moves content forward to Passed."""
        return self in (ComplianceStatus.REVIEW, ComplianceStatus.FAILED)


class Segment(str, Enum):
    """Marketing-behaviour segment assigned to an HCP profile."""

    EARLY_ADOPTER = "Early Adopter"
    EVIDENCE_DRIVEN = "Evidence Driven"
    MAINSTREAM = "Mainstream"
    CONSERVATIVE = "Conservative"
    GENERAL = "General"


class PipelineStage(Enum):
    """Stages of a single video generation run."""

    RESOLVING_INPUT = "resolving_input"
    SEGMENTING = "segmenting"
    DRAFTING = "drafting"
    EVALUATING = "evaluating"
    SYNTHESIZING = "synthesizing"
    PERSISTING = "persisting"
    DONE = "done"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        return self in (PipelineStage.DONE, PipelineStage.FAILED)

    def can_fail(self) -> bool:
        """Only input resolution and drafting are allowed to abort a run."""
        return self in (PipelineStage.RESOLVING_INPUT, PipelineStage.DRAFTING)


# Stage order, used for progress reporting
PIPELINE_STAGE_ORDER = [
    PipelineStage.RESOLVING_INPUT,
    PipelineStage.SEGMENTING,
    PipelineStage.DRAFTING,
    PipelineStage.EVALUATING,
    PipelineStage.SYNTHESIZING,
    PipelineStage.PERSISTING,
    PipelineStage.DONE,
]


def stage_progress(stage: PipelineStage) -> float:
    """Fraction of the run completed when `stage` starts (0-1)."""
    if stage not in PIPELINE_STAGE_ORDER:
        return 0.0
    return PIPELINE_STAGE_ORDER.index(stage) / (len(PIPELINE_STAGE_ORDER) - 1)
