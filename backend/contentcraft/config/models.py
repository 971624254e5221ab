"""
Model Configuration for Pipeline Steps

Defines the language models used by the two LLM-backed pipeline steps:
script drafting and compliance review. Each step has its own model
configuration so the steps can be tuned independently.

=== PROVIDER CONFIGURATION ===

Set LLM_PROVIDER environment variable to switch providers:
    - "gemini" : Use Google Gemini API (requires GEMINI_API_KEY)
    - "ollama" : Use local Ollama models

When LLM_PROVIDER is unset, Gemini is used if GEMINI_API_KEY exists,
otherwise Ollama. For Ollama, set OLLAMA_HOST if not using the default
(http://localhost:11434).
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class LLMProviderType(str, Enum):
    """Supported LLM providers"""
    GEMINI = "gemini"
    OLLAMA = "ollama"


def get_active_provider() -> LLMProviderType:
    """Get the active LLM provider from environment

    Priority:
    1. Explicit LLM_PROVIDER env var
    2. If GEMINI_API_KEY is set, use Gemini
    3. Default to Ollama (local)
    """
    provider_env = os.getenv("LLM_PROVIDER", "").lower()

    if provider_env == "ollama":
        return LLMProviderType.OLLAMA
    elif provider_env == "gemini":
        return LLMProviderType.GEMINI

    if os.getenv("GEMINI_API_KEY"):
        return LLMProviderType.GEMINI

    return LLMProviderType.OLLAMA


DEFAULT_OLLAMA_MODEL = "gemma3:12b"

# Mapping from Gemini models to Ollama equivalents
GEMINI_TO_OLLAMA_MAP = {
    "gemini-flash-lite-latest": "gemma3:4b",
    "gemini-2.0-flash": "gemma3:12b",
    "gemini-2.5-flash": "gemma3:12b",
    "gemini-2.5-pro": "deepseek-r1:14b",
}


@dataclass
class ModelConfig:
    """Configuration for a single pipeline step model"""
    model_name: str  # Gemini model name
    ollama_model: Optional[str] = None  # Override for Ollama
    temperature: float = 0.7
    description: str = ""

    def get_model_for_provider(self, provider: LLMProviderType) -> str:
        if provider == LLMProviderType.OLLAMA:
            if self.ollama_model:
                return self.ollama_model
            return GEMINI_TO_OLLAMA_MAP.get(self.model_name, DEFAULT_OLLAMA_MODEL)
        return self.model_name


@dataclass
class PipelineModels:
    """
    Model configuration for each LLM-backed step of the pipeline.

    Steps:
    1. Script drafting - personalised 5-10 second narration
    2. Compliance review - rubric scoring of the drafted narration
    """

    script_drafting: ModelConfig = field(default_factory=lambda: ModelConfig(
        model_name=os.getenv("SCRIPT_DRAFTING_MODEL", "gemini-2.5-flash"),
        temperature=0.7,
        description="Draft short evidence-based HCP narration",
    ))

    # Low temperature keeps verdicts stable across runs
    compliance_review: ModelConfig = field(default_factory=lambda: ModelConfig(
        model_name=os.getenv("COMPLIANCE_REVIEW_MODEL", "gemini-2.5-flash"),
        temperature=0.1,
        description="Score narration against the compliance rubric",
    ))


DEFAULT_PIPELINE_MODELS = PipelineModels()


def get_model_config(step_name: str) -> ModelConfig:
    """Get the model configuration for a pipeline step

    Raises:
        ValueError: If step_name is not a configured pipeline step
    """
    config = getattr(DEFAULT_PIPELINE_MODELS, step_name, None)
    if not isinstance(config, ModelConfig):
        raise ValueError(f"Unknown pipeline step: {step_name}")
    return config


def get_model_name(step_name: str, provider: Optional[LLMProviderType] = None) -> str:
    """Resolve the concrete model name for a step under the given provider"""
    return get_model_config(step_name).get_model_for_provider(provider or get_active_provider())
