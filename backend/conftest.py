import os
import tempfile

import pytest

# Storage directories are resolved when contentcraft.config is first imported
_TEST_ROOT = tempfile.mkdtemp(prefix="contentcraft-tests-")
os.environ.setdefault("CONTENTCRAFT_DATA_DIR", os.path.join(_TEST_ROOT, "data"))
os.environ.setdefault("CONTENTCRAFT_UPLOAD_DIR", os.path.join(_TEST_ROOT, "uploads"))


@pytest.fixture(autouse=True)
def provider_env(monkeypatch):
    """Keep every test away from real provider credentials"""
    monkeypatch.setenv("LLM_PROVIDER", "ollama")
    monkeypatch.setenv("VIDEO_PROVIDER", "heygen")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("HEYGEN_API_KEY", raising=False)
    monkeypatch.delenv("VEO_API_KEY", raising=False)
