"""
Application configuration and settings
"""

import os

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from .paths import PACKAGE_DIR, BACKEND_DIR, UPLOAD_DIR, DATA_DIR
from .constants import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    MAX_PROMPT_LENGTH,
    DEFAULT_USER_ID,
    DEFAULT_HCP_TEXT,
    PLAIN_TEXT_DOCUMENT_EXTENSIONS,
    MARKER_ONLY_DOCUMENT_EXTENSIONS,
    MAX_DOCUMENT_CHARS,
)
from .env import parse_bool_env, env_int, env_float
from .models import (
    LLMProviderType,
    ModelConfig,
    PipelineModels,
    DEFAULT_PIPELINE_MODELS,
    GEMINI_TO_OLLAMA_MAP,
    get_active_provider,
    get_model_config,
    get_model_name,
)
from .video import (
    VideoProviderType,
    VideoSynthesisSettings,
    PLACEHOLDER_VIDEO_URL,
    PLACEHOLDER_THUMBNAIL_URL,
    get_active_video_provider,
)

# LLM Provider settings
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "").lower() or None  # "gemini" or "ollama"
OLLAMA_HOST = os.getenv("OLLAMA_HOST", "http://localhost:11434")
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

__all__ = [
    "PACKAGE_DIR",
    "BACKEND_DIR",
    "UPLOAD_DIR",
    "DATA_DIR",
    "API_TITLE",
    "API_DESCRIPTION",
    "API_VERSION",
    "CORS_ORIGINS",
    "MAX_PROMPT_LENGTH",
    "DEFAULT_USER_ID",
    "DEFAULT_HCP_TEXT",
    "PLAIN_TEXT_DOCUMENT_EXTENSIONS",
    "MARKER_ONLY_DOCUMENT_EXTENSIONS",
    "MAX_DOCUMENT_CHARS",
    "parse_bool_env",
    "env_int",
    "env_float",
    "LLMProviderType",
    "ModelConfig",
    "PipelineModels",
    "DEFAULT_PIPELINE_MODELS",
    "GEMINI_TO_OLLAMA_MAP",
    "get_active_provider",
    "get_model_config",
    "get_model_name",
    "VideoProviderType",
    "VideoSynthesisSettings",
    "PLACEHOLDER_VIDEO_URL",
    "PLACEHOLDER_THUMBNAIL_URL",
    "get_active_video_provider",
    "LLM_PROVIDER",
    "OLLAMA_HOST",
    "GEMINI_API_KEY",
]
