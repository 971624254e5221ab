"""
Gemini LLM Provider

Implementation of LLMProvider for Google's Gemini AI models.
"""

import asyncio
import os
from typing import Any, List, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from contentcraft.core import LLMServiceError, ProviderErrorKind, get_logger
from .base import (
    LLMProvider,
    LLMResponse,
    LLMConfig,
    ProviderType,
    UsageStats,
)

logger = get_logger(__name__, component="gemini_provider")


def classify_status_code(code: Optional[int]) -> ProviderErrorKind:
    """Map an HTTP-style status code to a provider error kind"""
    if code in (401, 403):
        return ProviderErrorKind.AUTH
    if code in (402, 429):
        return ProviderErrorKind.QUOTA
    if code in (408, 504):
        return ProviderErrorKind.TIMEOUT
    return ProviderErrorKind.TRANSPORT


class GeminiProvider(LLMProvider):
    """Google Gemini LLM Provider"""

    provider_type = ProviderType.GEMINI

    AVAILABLE_MODELS = [
        "gemini-2.5-flash",
        "gemini-2.5-pro",
        "gemini-flash-lite-latest",
        "gemini-2.0-flash",
    ]

    def __init__(self, api_key: Optional[str] = None, client: Any = None):
        """Initialize Gemini provider

        Args:
            api_key: Gemini API key. If not provided, uses GEMINI_API_KEY env var
            client: Pre-built genai client (tests inject a fake here)
        """
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        self.client = client

        if self.client is None and self.api_key:
            self.client = genai.Client(api_key=self.api_key)

    def is_available(self) -> bool:
        return self.client is not None

    def list_models(self) -> List[str]:
        return self.AVAILABLE_MODELS.copy()

    def _build_generation_config(self, config: LLMConfig) -> types.GenerateContentConfig:
        """Build Gemini-specific generation config"""
        kwargs = {}

        if config.temperature is not None:
            kwargs["temperature"] = config.temperature

        if config.max_tokens:
            kwargs["max_output_tokens"] = config.max_tokens

        if config.system_instruction:
            kwargs["system_instruction"] = config.system_instruction

        # Structured output
        if config.response_schema:
            kwargs["response_mime_type"] = "application/json"
            kwargs["response_schema"] = config.response_schema

        return types.GenerateContentConfig(**kwargs)

    def _extract_usage(self, response: Any) -> Optional[UsageStats]:
        """Extract usage stats from Gemini response"""
        usage = getattr(response, "usage_metadata", None)
        if not usage:
            return None
        return UsageStats(
            input_tokens=getattr(usage, "prompt_token_count", 0) or 0,
            output_tokens=getattr(usage, "candidates_token_count", 0) or 0,
        )

    async def generate(
        self,
        prompt: str,
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate response using Gemini API

        Raises:
            LLMServiceError: If the client is not configured or the API call fails
        """
        if not self.is_available():
            raise LLMServiceError(
                "Gemini provider is not available. Check API key.",
                kind=ProviderErrorKind.UNAVAILABLE,
                provider=self.name,
            )

        if config is None:
            config = LLMConfig(model=kwargs.get("model", "gemini-2.5-flash"))

        model = kwargs.get("model", config.model)

        try:
            response = await asyncio.to_thread(
                self.client.models.generate_content,
                model=model,
                contents=prompt,
                config=self._build_generation_config(config),
            )
        except genai_errors.APIError as e:
            logger.warning("Gemini request failed", extra={"model": model, "code": e.code, "error": str(e)})
            raise LLMServiceError(
                f"Gemini request failed: {e}",
                kind=classify_status_code(e.code),
                provider=self.name,
            ) from e

        return LLMResponse(
            text=response.text.strip() if response.text else "",
            model=model,
            provider=self.provider_type,
            usage=self._extract_usage(response),
            raw_response=response,
        )
