"""
Paths configuration

Centralized directory paths for the application.
"""

import os
from pathlib import Path

# Base directories
PACKAGE_DIR = Path(__file__).parent.parent
BACKEND_DIR = PACKAGE_DIR.parent
UPLOAD_DIR = Path(os.getenv("CONTENTCRAFT_UPLOAD_DIR", str(BACKEND_DIR / "uploads")))
DATA_DIR = Path(os.getenv("CONTENTCRAFT_DATA_DIR", str(BACKEND_DIR / "data")))

# Ensure directories exist
UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
DATA_DIR.mkdir(parents=True, exist_ok=True)

__all__ = ["PACKAGE_DIR", "BACKEND_DIR", "UPLOAD_DIR", "DATA_DIR"]
