"""
Core Exceptions
Standardized exceptions for the application.

Only NotFoundError, ValidationError and ScriptGenerationError are allowed to
abort a pipeline run. ProviderError subclasses are raised by external service
clients and absorbed at component boundaries.
"""

from enum import Enum
from typing import Optional


class ContentCraftError(Exception):
    """Base exception for all application errors."""
    pass


class NotFoundError(ContentCraftError):
    """A referenced upload or video does not exist."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} with ID {resource_id} not found")


class ValidationError(ContentCraftError):
    """Request input is missing or malformed; nothing was started."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class PipelineError(ContentCraftError):
    """Base exception for processing pipeline errors."""
    pass


class ScriptGenerationError(PipelineError):
    """Narration drafting failed; fatal to the run."""
    pass


class InfrastructureError(ContentCraftError):
    """Base exception for infrastructure errors (LLM, video provider, storage)."""
    pass


class ProviderErrorKind(str, Enum):
    """Classification of external provider failures"""
    AUTH = "auth"
    QUOTA = "quota"
    TRANSPORT = "transport"
    RESPONSE = "response"
    TIMEOUT = "timeout"
    UNAVAILABLE = "unavailable"


class ProviderError(InfrastructureError):
    """An external service call failed."""

    def __init__(
        self,
        message: str,
        kind: ProviderErrorKind = ProviderErrorKind.TRANSPORT,
        provider: Optional[str] = None,
    ):
        self.kind = kind
        self.provider = provider
        super().__init__(message)


class LLMServiceError(ProviderError):
    """The LLM text service failed or returned unusable output."""
    pass


class VideoProviderError(ProviderError):
    """The video synthesis provider failed."""
    pass
