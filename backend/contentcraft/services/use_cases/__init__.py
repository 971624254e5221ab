"""
Use Cases package - Business logic layer.

- Each use case is ONE business operation
- Use cases are independent of HTTP
- Routes translate domain exceptions into status codes
"""

from .base import UseCase
from .upload_use_case import UploadUseCase, UploadCommand
from .generation_use_case import GenerationUseCase, GenerationOutcome
from .video_library_use_case import (
    ComplianceStats,
    compute_compliance_stats,
    GetVideoUseCase,
    ListVideosUseCase,
    DeleteVideoUseCase,
    ApproveComplianceUseCase,
    ComplianceStatsUseCase,
)

__all__ = [
    "UseCase",
    "UploadUseCase",
    "UploadCommand",
    "GenerationUseCase",
    "GenerationOutcome",
    "ComplianceStats",
    "compute_compliance_stats",
    "GetVideoUseCase",
    "ListVideosUseCase",
    "DeleteVideoUseCase",
    "ApproveComplianceUseCase",
    "ComplianceStatsUseCase",
]
