"""
Core Module - Cross-cutting concerns and shared infrastructure

Organization:
    - logging.py: Structured logging configuration and utilities
    - exceptions.py: Error taxonomy shared by the pipeline and the API
    - security.py: Record-ID and path-containment checks

Usage:
    from contentcraft.core import get_logger, NotFoundError
"""

from .logging import (
    setup_logging,
    get_logger,
    set_request_id,
    set_run_id,
    clear_context,
    LogTimer,
)
from .exceptions import (
    ContentCraftError,
    NotFoundError,
    ValidationError,
    PipelineError,
    ScriptGenerationError,
    InfrastructureError,
    ProviderErrorKind,
    ProviderError,
    LLMServiceError,
    VideoProviderError,
)
from .security import is_safe_record_id, validate_path_within_directory

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "set_request_id",
    "set_run_id",
    "clear_context",
    "LogTimer",
    # Exceptions
    "ContentCraftError",
    "NotFoundError",
    "ValidationError",
    "PipelineError",
    "ScriptGenerationError",
    "InfrastructureError",
    "ProviderErrorKind",
    "ProviderError",
    "LLMServiceError",
    "VideoProviderError",
    # Security
    "is_safe_record_id",
    "validate_path_within_directory",
]
