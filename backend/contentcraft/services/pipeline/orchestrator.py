"""
Video generation pipeline

One run turns an HCP profile and a prompt into a persisted, compliance-
checked video record:

    ResolvingInput -> Segmenting -> Drafting -> Evaluating
        -> Synthesizing -> Persisting -> Done

A run fails only while resolving input (unknown upload) or drafting (no
usable script). Compliance review and video synthesis absorb their own
provider failures and hand back soft-failure markers, which the run
collects and reports as degraded output.
"""

import asyncio
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from contentcraft.config import DEFAULT_HCP_TEXT, DEFAULT_USER_ID, MAX_PROMPT_LENGTH
from contentcraft.core import (
    ContentCraftError,
    NotFoundError,
    ValidationError,
    get_logger,
    set_run_id,
)
from contentcraft.models.status import PipelineStage, stage_progress
from contentcraft.services.infrastructure.storage import (
    Upload,
    UploadRepository,
    Video,
    VideoRepository,
)
from .compliance import ComplianceEvaluator, ComplianceResult
from .contracts import ProviderSoftFailure
from .script_drafting import ScriptDraft, ScriptDrafter
from .segmentation import HCPSegmenter, SegmentResult, clamp_confidence
from .video_synthesis import SynthesisResult, VideoSynthesizer

logger = get_logger(__name__, component="pipeline")

ProgressCallback = Callable[[Dict[str, Any]], None]

_FILLER_PHRASES = ("create a", "video for", "about")


def derive_video_title(prompt: str, target_audience: str) -> str:
    """Build a short title from the prompt.

    Example:
        >>> derive_video_title("Create a video about a new heart failure drug", "Cardiologist")
        'Cardiologist Video Heart Failure'
    """
    text = prompt.lower()
    for phrase in _FILLER_PHRASES:
        text = text.replace(phrase, "")
    keywords = [word for word in text.split(" ") if len(word) > 3][:3]
    if not keywords:
        return f"{target_audience} Information Video"
    return f"{target_audience} " + " ".join(word[0].upper() + word[1:] for word in keywords)


@dataclass
class PipelineRequest:
    prompt: str
    upload_id: Optional[str] = None
    hcp_text: Optional[str] = None
    user_id: Optional[str] = None


@dataclass
class PipelineResult:
    video: Video
    upload: Upload
    segment: SegmentResult
    draft: ScriptDraft
    compliance: ComplianceResult
    synthesis: SynthesisResult
    soft_failures: List[ProviderSoftFailure] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.soft_failures)

    @property
    def warnings(self) -> List[str]:
        return [failure.describe() for failure in self.soft_failures]


def validate_request(request: PipelineRequest) -> str:
    """Return the trimmed prompt or raise ValidationError"""
    prompt = (request.prompt or "").strip()
    if not prompt:
        raise ValidationError("Prompt is required", field="prompt")
    if len(prompt) > MAX_PROMPT_LENGTH:
        raise ValidationError(f"Prompt must be at most {MAX_PROMPT_LENGTH} characters", field="prompt")
    return prompt


class VideoPipeline:
    """Linear pipeline over injected collaborators. No retries at this level."""

    def __init__(
        self,
        upload_repository: UploadRepository,
        video_repository: VideoRepository,
        segmenter: HCPSegmenter,
        drafter: ScriptDrafter,
        evaluator: ComplianceEvaluator,
        synthesizer: VideoSynthesizer,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        self.upload_repository = upload_repository
        self.video_repository = video_repository
        self.segmenter = segmenter
        self.drafter = drafter
        self.evaluator = evaluator
        self.synthesizer = synthesizer
        self.progress_callback = progress_callback

    def _enter(self, stage: PipelineStage, message: str) -> None:
        logger.info(message, extra={"stage": stage.value})
        if self.progress_callback:
            self.progress_callback({
                "stage": stage.value,
                "progress": round(stage_progress(stage) * 100, 1),
                "message": message,
            })

    async def _resolve_input(self, request: PipelineRequest) -> Upload:
        if request.upload_id:
            upload = await asyncio.to_thread(self.upload_repository.get, request.upload_id)
            if upload is None:
                raise NotFoundError("Upload", request.upload_id)
            return upload

        hcp_text = (request.hcp_text or "").strip() or DEFAULT_HCP_TEXT
        return await asyncio.to_thread(
            self.upload_repository.create,
            hcp_text,
            request.user_id or DEFAULT_USER_ID,
        )

    async def run(self, request: PipelineRequest) -> PipelineResult:
        """
        Execute one generation run.

        Raises:
            ValidationError: Prompt missing or too long; nothing is created
            NotFoundError: upload_id does not exist
            ScriptGenerationError: Drafting failed; no video is created
        """
        prompt = validate_request(request)

        run_id = uuid.uuid4().hex[:12]
        set_run_id(run_id)
        stage = PipelineStage.RESOLVING_INPUT

        try:
            self._enter(stage, "Resolving HCP input")
            upload = await self._resolve_input(request)

            stage = PipelineStage.SEGMENTING
            self._enter(stage, "Segmenting HCP profile")
            segment = await self.segmenter.segment(upload.hcp_text)

            stage = PipelineStage.DRAFTING
            self._enter(stage, "Drafting narration script")
            draft = await self.drafter.draft(upload.hcp_text, prompt, upload.document_path)

            stage = PipelineStage.EVALUATING
            self._enter(stage, "Evaluating compliance")
            compliance = await self.evaluator.evaluate(draft.script)

            stage = PipelineStage.SYNTHESIZING
            self._enter(stage, "Synthesizing avatar video")
            synthesis = await self.synthesizer.synthesize(draft.script, draft.target_audience)

            soft_failures = [
                failure for failure in (compliance.soft_failure, synthesis.soft_failure) if failure
            ]

            stage = PipelineStage.PERSISTING
            self._enter(stage, "Saving video record")
            video = Video(
                title=derive_video_title(prompt, draft.target_audience),
                upload_id=upload.id,
                prompt=prompt,
                target_hcp=draft.target_audience,
                video_url=synthesis.video_url,
                thumbnail_url=synthesis.thumbnail_url,
                duration_seconds=draft.estimated_duration_seconds,
                compliance_status=compliance.status,
                compliance_details=compliance.details(),
                meditag_segment=segment.segment,
                segment_confidence=clamp_confidence(segment.confidence),
                generated_script=draft.script,
                provider_video_id=synthesis.provider_video_id,
                degraded=bool(soft_failures),
                warnings=[failure.describe() for failure in soft_failures],
            )
            video = await asyncio.to_thread(self.video_repository.create, video)
        except ContentCraftError as e:
            if stage.can_fail():
                logger.error("Pipeline run failed", extra={
                    "stage": stage.value,
                    "error_type": type(e).__name__,
                    "error": str(e),
                })
                if self.progress_callback:
                    self.progress_callback({
                        "stage": PipelineStage.FAILED.value,
                        "progress": 100.0,
                        "message": str(e),
                    })
            raise

        self._enter(PipelineStage.DONE, "Pipeline complete")
        logger.info("Video generated", extra={
            "video_id": video.id,
            "compliance_status": video.compliance_status.value,
            "degraded": video.degraded,
        })

        return PipelineResult(
            video=video,
            upload=upload,
            segment=segment,
            draft=draft,
            compliance=compliance,
            synthesis=synthesis,
            soft_failures=soft_failures,
        )
