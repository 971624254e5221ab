"""
LLM Service - Abstraction layer for Language Model providers

Providers:
- Gemini (Google's AI models)
- Ollama (local models like gemma3, deepseek, etc.)

Usage:
    from contentcraft.services.llm import StructuredLLMService

    llm = StructuredLLMService()
    verdict = await llm.complete_json(system_instruction, user_content, schema, step="compliance_review")
"""

from .base import (
    LLMProvider,
    LLMResponse,
    LLMConfig,
    ProviderType,
    UsageStats,
)
from .factory import get_llm_provider, get_default_provider_type, clear_provider_cache
from .gemini_provider import GeminiProvider
from .ollama_provider import OllamaProvider
from .structured import StructuredLLMService

__all__ = [
    # Base classes
    "LLMProvider",
    "LLMResponse",
    "LLMConfig",
    "ProviderType",
    "UsageStats",
    # Providers
    "GeminiProvider",
    "OllamaProvider",
    # Factory
    "get_llm_provider",
    "get_default_provider_type",
    "clear_provider_cache",
    # Structured output
    "StructuredLLMService",
]
