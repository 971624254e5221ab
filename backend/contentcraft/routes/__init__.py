"""
Routes module - contains all API route handlers
"""

from .uploads import router as uploads_router
from .videos import router as videos_router
from .stats import router as stats_router

__all__ = [
    "uploads_router",
    "videos_router",
    "stats_router",
]
