"""
Structured LLM service

The single LLM operation the pipeline depends on: send a system instruction
and user content, get back a JSON object. Provider choice, model lookup per
pipeline step and reply recovery all happen here.
"""

from typing import Any, Callable, Dict, Optional

from contentcraft.config import LLMProviderType, get_model_config
from contentcraft.core import LLMServiceError, ProviderErrorKind, LogTimer, get_logger
from contentcraft.services.infrastructure.parsing import parse_json_object
from .base import LLMConfig, LLMProvider
from .factory import get_llm_provider

logger = get_logger(__name__, component="structured_llm")


class StructuredLLMService:
    """JSON-returning wrapper around an LLMProvider

    The provider is resolved lazily so the application can start (and serve
    everything except generation) when no LLM backend is reachable.
    """

    def __init__(
        self,
        provider: Optional[LLMProvider] = None,
        provider_factory: Callable[[], LLMProvider] = get_llm_provider,
    ):
        self._provider = provider
        self._provider_factory = provider_factory

    def _get_provider(self) -> LLMProvider:
        if self._provider is None:
            try:
                self._provider = self._provider_factory()
            except ValueError as e:
                raise LLMServiceError(str(e), kind=ProviderErrorKind.UNAVAILABLE) from e
        return self._provider

    async def complete_json(
        self,
        system_instruction: str,
        user_content: str,
        response_schema: Optional[Dict[str, Any]] = None,
        step: str = "script_drafting",
    ) -> Dict[str, Any]:
        """Run one structured completion

        Args:
            system_instruction: Role and rules for the model
            user_content: The per-request content
            response_schema: JSON schema describing the expected object
            step: Pipeline step name selecting model and temperature

        Returns:
            The parsed JSON object

        Raises:
            LLMServiceError: Provider unavailable, call failed, or reply is not a JSON object
        """
        provider = self._get_provider()
        model_config = get_model_config(step)
        model = model_config.get_model_for_provider(LLMProviderType(provider.provider_type.value))

        config = LLMConfig(
            model=model,
            temperature=model_config.temperature,
            response_schema=response_schema,
            system_instruction=system_instruction,
        )

        with LogTimer(logger, f"llm:{step}"):
            response = await provider.generate(user_content, config=config)

        parsed = parse_json_object(response.text)
        if parsed is None:
            logger.warning("LLM reply was not a JSON object", extra={
                "step": step,
                "llm_model": model,
                "reply_preview": response.text[:200],
            })
            raise LLMServiceError(
                f"{provider.name} returned no JSON object for {step}",
                kind=ProviderErrorKind.RESPONSE,
                provider=provider.name,
            )

        return parsed
