"""
Constants configuration

API settings, CORS configuration and pipeline defaults.
"""

from .env import env_int

# API settings
API_TITLE = "ContentCraft API"
API_DESCRIPTION = "Generate compliance-checked HCP avatar videos from a profile and a prompt"
API_VERSION = "1.0.0"

# CORS origins
CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5000",
    "http://localhost:5173",
]

# Request limits
MAX_PROMPT_LENGTH = 500

# Used when a generation request carries no user identity
DEFAULT_USER_ID = "anonymous"

# Substituted when a generation request carries neither an upload nor HCP text
DEFAULT_HCP_TEXT = "Cardiologist with 10 years of experience, working in a large hospital setting"

# Reference documents the script drafter knows about
PLAIN_TEXT_DOCUMENT_EXTENSIONS = [".txt", ".md"]
MARKER_ONLY_DOCUMENT_EXTENSIONS = [".pdf", ".docx", ".doc"]
MAX_DOCUMENT_CHARS = env_int("MAX_DOCUMENT_CHARS", 8000, minimum=1)

__all__ = [
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
]
