"""
Ollama LLM Provider

Implementation of LLMProvider for local models via Ollama.
"""

import json
import os
from typing import Any, Dict, List, Optional

import httpx

from contentcraft.config import GEMINI_TO_OLLAMA_MAP
from contentcraft.config.models import DEFAULT_OLLAMA_MODEL
from contentcraft.core import LLMServiceError, ProviderErrorKind, get_logger
from .base import (
    LLMProvider,
    LLMResponse,
    LLMConfig,
    ProviderType,
    UsageStats,
)
from .gemini_provider import classify_status_code

logger = get_logger(__name__, component="ollama_provider")


class OllamaProvider(LLMProvider):
    """Ollama LLM Provider for local models"""

    provider_type = ProviderType.OLLAMA

    RECOMMENDED_MODELS = [
        "gemma3:12b",
        "gemma3:4b",
        "deepseek-r1:14b",
        "llama3.3:70b",
        "mistral:7b",
    ]

    DEFAULT_MODEL = DEFAULT_OLLAMA_MODEL

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 300.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Ollama provider

        Args:
            base_url: Ollama server URL. Defaults to OLLAMA_HOST env or http://localhost:11434
            timeout: Request timeout in seconds (default 5 minutes for large models)
            transport: Optional httpx transport for generate requests
        """
        self.base_url = (base_url or os.getenv("OLLAMA_HOST", "http://localhost:11434")).rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self._available_models: Optional[List[str]] = None

    def is_available(self) -> bool:
        """Check if Ollama server is available"""
        try:
            with httpx.Client(timeout=5.0) as client:
                response = client.get(f"{self.base_url}/api/tags")
                return response.status_code == 200
        except httpx.HTTPError:
            return False

    def list_models(self) -> List[str]:
        """List models available on the Ollama server"""
        if self._available_models is not None:
            return self._available_models

        try:
            with httpx.Client(timeout=10.0) as client:
                response = client.get(f"{self.base_url}/api/tags")
                if response.status_code == 200:
                    self._available_models = [
                        model["name"] for model in response.json().get("models", [])
                    ]
                    return self._available_models
        except httpx.HTTPError as e:
            logger.warning("Failed to list Ollama models", extra={"error": str(e)})

        return self.RECOMMENDED_MODELS

    def _resolve_model(self, model: str) -> str:
        """Convert Gemini model names to Ollama equivalents"""
        if model.startswith("gemini"):
            ollama_model = GEMINI_TO_OLLAMA_MAP.get(model, self.DEFAULT_MODEL)
            logger.debug("Mapped model", extra={"requested": model, "resolved": ollama_model})
            return ollama_model
        return model

    def _build_options(self, config: LLMConfig) -> Optional[Dict[str, Any]]:
        options = {}

        if config.temperature is not None:
            options["temperature"] = config.temperature

        if config.max_tokens:
            options["num_predict"] = config.max_tokens

        options.update(config.extra_options)
        return options or None

    def _build_payload(self, prompt: str, model: str, config: LLMConfig) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": model,
            "prompt": prompt,
            "stream": False,
        }

        options = self._build_options(config)
        if options:
            payload["options"] = options

        if config.system_instruction:
            payload["system"] = config.system_instruction

        # Ollama has no schema enforcement; request JSON and describe the shape
        if config.response_schema:
            payload["format"] = "json"
            payload["prompt"] += (
                f"\n\nRespond with valid JSON matching this schema: {json.dumps(config.response_schema)}"
            )

        return payload

    def _parse_response(self, data: Dict[str, Any], model: str) -> LLMResponse:
        usage = None
        if "prompt_eval_count" in data or "eval_count" in data:
            usage = UsageStats(
                input_tokens=data.get("prompt_eval_count", 0),
                output_tokens=data.get("eval_count", 0),
            )

        return LLMResponse(
            text=str(data.get("response", "")).strip(),
            model=model,
            provider=self.provider_type,
            usage=usage,
            raw_response=data,
        )

    async def generate(
        self,
        prompt: str,
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate response using the Ollama /api/generate endpoint

        Raises:
            LLMServiceError: On timeout, HTTP error status or transport failure
        """
        if config is None:
            config = LLMConfig(model=kwargs.get("model", self.DEFAULT_MODEL))

        model = self._resolve_model(kwargs.get("model", config.model))
        payload = self._build_payload(prompt, model, config)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(f"{self.base_url}/api/generate", json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            raise LLMServiceError(
                f"Ollama request timed out: {e}", kind=ProviderErrorKind.TIMEOUT, provider=self.name
            ) from e
        except httpx.HTTPStatusError as e:
            raise LLMServiceError(
                f"Ollama returned HTTP {e.response.status_code}",
                kind=classify_status_code(e.response.status_code),
                provider=self.name,
            ) from e
        except httpx.HTTPError as e:
            raise LLMServiceError(
                f"Ollama request failed: {e}", kind=ProviderErrorKind.TRANSPORT, provider=self.name
            ) from e
        except ValueError as e:
            raise LLMServiceError(
                "Ollama returned a non-JSON body", kind=ProviderErrorKind.RESPONSE, provider=self.name
            ) from e

        if not isinstance(data, dict):
            raise LLMServiceError(
                "Ollama returned an unexpected body", kind=ProviderErrorKind.RESPONSE, provider=self.name
            )

        return self._parse_response(data, model)
