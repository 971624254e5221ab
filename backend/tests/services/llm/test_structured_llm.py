"""
Tests for StructuredLLMService
"""

from typing import List

import pytest

from contentcraft.core import LLMServiceError, ProviderErrorKind
from contentcraft.services.llm import LLMProvider, LLMResponse, ProviderType, StructuredLLMService


class ScriptedProvider(LLMProvider):
    provider_type = ProviderType.OLLAMA

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.configs = []

    async def generate(self, prompt, config=None, **kwargs):
        self.configs.append((prompt, config))
        if self.error:
            raise self.error
        return LLMResponse(text=self.text, model=config.model, provider=self.provider_type)

    def is_available(self) -> bool:
        return True

    def list_models(self) -> List[str]:
        return ["gemma3:12b"]


class TestStructuredLLMService:

    @pytest.mark.asyncio
    async def test_returns_parsed_object(self):
        provider = ScriptedProvider('```json\n{"script": "Hello", "duration": 7}\n```')
        service = StructuredLLMService(provider=provider)

        data = await service.complete_json("system", "user", {"type": "object"}, step="script_drafting")

        assert data == {"script": "Hello", "duration": 7}
        prompt, config = provider.configs[0]
        assert prompt == "user"
        assert config.system_instruction == "system"
        assert config.response_schema == {"type": "object"}
        assert config.model == "gemma3:12b"
        assert config.temperature == 0.7

    @pytest.mark.asyncio
    async def test_step_selects_temperature(self):
        provider = ScriptedProvider('{"passed": true}')
        await StructuredLLMService(provider=provider).complete_json("s", "u", step="compliance_review")
        assert provider.configs[0][1].temperature == 0.1

    @pytest.mark.asyncio
    async def test_non_object_reply_is_response_error(self):
        service = StructuredLLMService(provider=ScriptedProvider("I cannot help with that."))
        with pytest.raises(LLMServiceError) as exc_info:
            await service.complete_json("s", "u")
        assert exc_info.value.kind == ProviderErrorKind.RESPONSE

    @pytest.mark.asyncio
    async def test_provider_errors_propagate(self):
        error = LLMServiceError("down", kind=ProviderErrorKind.TRANSPORT)
        service = StructuredLLMService(provider=ScriptedProvider(error=error))
        with pytest.raises(LLMServiceError) as exc_info:
            await service.complete_json("s", "u")
        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_unavailable_provider(self):
        def factory():
            raise ValueError("Ollama provider is not available")

        service = StructuredLLMService(provider_factory=factory)
        with pytest.raises(LLMServiceError) as exc_info:
            await service.complete_json("s", "u")
        assert exc_info.value.kind == ProviderErrorKind.UNAVAILABLE

    @pytest.mark.asyncio
    async def test_provider_resolved_once(self):
        calls = []

        def factory():
            calls.append(1)
            return ScriptedProvider('{"ok": true}')

        service = StructuredLLMService(provider_factory=factory)
        await service.complete_json("s", "u")
        await service.complete_json("s", "u")
        assert len(calls) == 1
