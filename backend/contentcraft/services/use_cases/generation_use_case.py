"""
Generation use case - run the pipeline for one request and shape the outcome.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from contentcraft.core import get_logger
from contentcraft.services.infrastructure.storage import Video
from contentcraft.services.pipeline import PipelineRequest, ProviderSoftFailure, VideoPipeline
from .base import UseCase

logger = get_logger(__name__, component="generation_use_case")


@dataclass
class GenerationOutcome:
    video: Video
    message: str
    degraded: bool = False
    warning: Optional[str] = None
    soft_failures: List[ProviderSoftFailure] = field(default_factory=list)


class GenerationUseCase(UseCase[PipelineRequest, GenerationOutcome]):

    def __init__(self, pipeline: VideoPipeline):
        self.pipeline = pipeline

    async def execute(self, request: PipelineRequest) -> GenerationOutcome:
        result = await self.pipeline.run(request)

        if result.degraded:
            warning = " ".join(result.warnings)
            message = "Video generated with placeholder or limited-review content"
        else:
            warning = None
            message = "Video generated successfully"

        return GenerationOutcome(
            video=result.video,
            message=message,
            degraded=result.degraded,
            warning=warning,
            soft_failures=result.soft_failures,
        )
