"""
Service wiring for the HTTP layer.

Each collaborator is built once on first use and handed to routes through
FastAPI Depends. Tests replace any of them with app.dependency_overrides.
"""

from functools import lru_cache

from fastapi import Depends

from .config import VideoSynthesisSettings
from .services.infrastructure.storage import (
    DocumentStore,
    FileBasedUploadRepository,
    FileBasedVideoRepository,
    UploadRepository,
    VideoRepository,
)
from .services.llm import StructuredLLMService
from .services.pipeline import VideoPipeline
from .services.pipeline.compliance import ComplianceEvaluator
from .services.pipeline.script_drafting import ScriptDrafter
from .services.pipeline.segmentation import HCPSegmenter
from .services.pipeline.video_synthesis import VideoSynthesizer, create_video_provider
from .services.use_cases import (
    ApproveComplianceUseCase,
    ComplianceStatsUseCase,
    DeleteVideoUseCase,
    GenerationUseCase,
    GetVideoUseCase,
    ListVideosUseCase,
    UploadUseCase,
)


@lru_cache(maxsize=1)
def get_upload_repository() -> UploadRepository:
    return FileBasedUploadRepository()


@lru_cache(maxsize=1)
def get_video_repository() -> VideoRepository:
    return FileBasedVideoRepository()


@lru_cache(maxsize=1)
def get_document_store() -> DocumentStore:
    return DocumentStore()


@lru_cache(maxsize=1)
def get_llm_service() -> StructuredLLMService:
    return StructuredLLMService()


@lru_cache(maxsize=1)
def get_video_synthesizer() -> VideoSynthesizer:
    settings = VideoSynthesisSettings.from_env()
    return VideoSynthesizer(create_video_provider(settings), settings)


def get_pipeline(
    upload_repository: UploadRepository = Depends(get_upload_repository),
    video_repository: VideoRepository = Depends(get_video_repository),
    document_store: DocumentStore = Depends(get_document_store),
    llm_service: StructuredLLMService = Depends(get_llm_service),
    synthesizer: VideoSynthesizer = Depends(get_video_synthesizer),
) -> VideoPipeline:
    return VideoPipeline(
        upload_repository=upload_repository,
        video_repository=video_repository,
        segmenter=HCPSegmenter(),
        drafter=ScriptDrafter(llm_service, document_store),
        evaluator=ComplianceEvaluator(llm_service),
        synthesizer=synthesizer,
    )


def get_upload_use_case(
    upload_repository: UploadRepository = Depends(get_upload_repository),
    document_store: DocumentStore = Depends(get_document_store),
) -> UploadUseCase:
    return UploadUseCase(upload_repository, document_store)


def get_generation_use_case(pipeline: VideoPipeline = Depends(get_pipeline)) -> GenerationUseCase:
    return GenerationUseCase(pipeline)


def get_video_use_case(repo: VideoRepository = Depends(get_video_repository)) -> GetVideoUseCase:
    return GetVideoUseCase(repo)


def get_list_videos_use_case(repo: VideoRepository = Depends(get_video_repository)) -> ListVideosUseCase:
    return ListVideosUseCase(repo)


def get_delete_video_use_case(repo: VideoRepository = Depends(get_video_repository)) -> DeleteVideoUseCase:
    return DeleteVideoUseCase(repo)


def get_approve_compliance_use_case(
    repo: VideoRepository = Depends(get_video_repository),
) -> ApproveComplianceUseCase:
    return ApproveComplianceUseCase(repo)


def get_compliance_stats_use_case(
    repo: VideoRepository = Depends(get_video_repository),
) -> ComplianceStatsUseCase:
    return ComplianceStatsUseCase(repo)
