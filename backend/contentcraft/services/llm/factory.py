"""
LLM Provider Factory

Creates and manages LLM provider instances based on configuration.
"""

from typing import Dict, Optional

from contentcraft.config import get_active_provider
from .base import LLMProvider, ProviderType
from .gemini_provider import GeminiProvider
from .ollama_provider import OllamaProvider


# Cache for provider instances
_provider_cache: Dict[ProviderType, LLMProvider] = {}


def get_default_provider_type() -> ProviderType:
    """Provider selected by LLM_PROVIDER, or auto-detected from GEMINI_API_KEY"""
    return ProviderType(get_active_provider().value)


def get_llm_provider(
    provider_type: Optional[ProviderType] = None,
    use_cache: bool = True,
    **kwargs
) -> LLMProvider:
    """Get an LLM provider instance

    Args:
        provider_type: Specific provider to use. If None, uses default.
        use_cache: Whether to cache and reuse provider instances
        **kwargs: Provider-specific initialization options

    Raises:
        ValueError: If provider is not available
    """
    if provider_type is None:
        provider_type = get_default_provider_type()

    if use_cache and provider_type in _provider_cache:
        return _provider_cache[provider_type]

    provider: LLMProvider

    if provider_type == ProviderType.GEMINI:
        provider = GeminiProvider(api_key=kwargs.get("api_key"))
        if not provider.is_available():
            raise ValueError(
                "Gemini provider is not available. "
                "Set GEMINI_API_KEY environment variable or use LLM_PROVIDER=ollama"
            )

    elif provider_type == ProviderType.OLLAMA:
        provider = OllamaProvider(
            base_url=kwargs.get("base_url"),
            timeout=kwargs.get("timeout", 300.0),
        )
        if not provider.is_available():
            raise ValueError(
                "Ollama provider is not available. "
                "Make sure Ollama is running (ollama serve) or set LLM_PROVIDER=gemini"
            )

    else:
        raise ValueError(f"Unknown provider type: {provider_type}")

    if use_cache:
        _provider_cache[provider_type] = provider

    return provider


def clear_provider_cache():
    """Clear the provider cache"""
    _provider_cache.clear()
