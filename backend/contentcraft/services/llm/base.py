"""
Base classes for LLM providers

Defines the abstract interface that all LLM providers must implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ProviderType(str, Enum):
    """Supported LLM providers"""
    GEMINI = "gemini"
    OLLAMA = "ollama"


@dataclass
class LLMConfig:
    """Configuration for an LLM request"""
    model: str
    temperature: float = 0.7
    max_tokens: Optional[int] = None
    response_schema: Optional[Dict[str, Any]] = None  # Requests JSON output when set
    system_instruction: Optional[str] = None

    # Provider-specific options
    extra_options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class UsageStats:
    """Token usage statistics"""
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self):
        if self.total_tokens == 0:
            self.total_tokens = self.input_tokens + self.output_tokens


@dataclass
class LLMResponse:
    """Unified response from any LLM provider"""
    text: str
    model: str
    provider: ProviderType
    usage: Optional[UsageStats] = None
    raw_response: Any = None


class LLMProvider(ABC):
    """Abstract base class for LLM providers

    Implementations raise LLMServiceError (with a ProviderErrorKind) for
    every failure of the underlying service, so callers never need to know
    which SDK or HTTP client is in use.
    """

    provider_type: ProviderType

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate a response from the LLM

        Args:
            prompt: The user content
            config: LLM configuration options
            **kwargs: Additional provider-specific options

        Returns:
            LLMResponse with the generated text and metadata
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is available and properly configured"""
        pass

    @abstractmethod
    def list_models(self) -> List[str]:
        """List available models for this provider"""
        pass

    @property
    def name(self) -> str:
        """Get the provider name"""
        return self.provider_type.value
