"""
ContentCraft Backend API
FastAPI application for generating compliance-checked HCP avatar videos

This is the main entry point that wires together all routes and services.
"""

import os
import uuid
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    DATA_DIR,
    UPLOAD_DIR,
    get_active_provider,
    get_active_video_provider,
    parse_bool_env,
)
from .routes import uploads_router, videos_router, stats_router
from .core import setup_logging, get_logger, set_request_id, clear_context

# Initialize logging
log_level = os.getenv("LOG_LEVEL", "INFO")
log_file = os.getenv("LOG_FILE")
use_json_logs = parse_bool_env(os.getenv("JSON_LOGS"), default=False)

setup_logging(
    level=log_level,
    log_file=Path(log_file) if log_file else None,
    use_json=use_json_logs,
)

logger = get_logger(__name__, service="api")
logger.info("Starting ContentCraft Backend API", extra={
    "log_level": log_level,
    "json_logs": use_json_logs,
    "llm_provider": get_active_provider().value,
    "video_provider": get_active_video_provider().value,
})

# Create FastAPI app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
)


@app.middleware("http")
async def add_request_correlation(request: Request, call_next):
    """Tag every request with a correlation ID and log the response status."""
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    set_request_id(request_id)
    path = request.url.path

    logger.info(f"{request.method} {path}", extra={
        "method": request.method,
        "path": path,
        "client": request.client.host if request.client else "unknown",
    })

    try:
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        response.headers.setdefault("X-Content-Type-Options", "nosniff")

        logger.info(f"Response: {response.status_code}", extra={
            "status_code": response.status_code,
            "method": request.method,
            "path": path,
        })
        return response
    finally:
        clear_context()


# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(uploads_router)
app.include_router(videos_router)
app.include_router(stats_router)

# Reference documents are served back under the same prefix the document store accepts.
# Mounted after the routers so POST /uploads reaches the upload route.
app.mount("/uploads", StaticFiles(directory=str(UPLOAD_DIR)), name="uploads")


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "message": "ContentCraft API - Generate compliance-checked HCP videos",
        "version": API_VERSION,
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Missing provider credentials do not make the service unhealthy: runs
    still complete with fallback review and placeholder media, so they are
    reported as "degraded" instead.
    """
    llm_provider = get_active_provider().value
    video_provider = get_active_video_provider().value

    checks = {
        "llm_provider": {
            "provider": llm_provider,
            "credentials_configured": llm_provider != "gemini" or bool(os.getenv("GEMINI_API_KEY")),
        },
        "video_provider": {
            "provider": video_provider,
            "credentials_configured": bool(os.getenv(f"{video_provider.upper()}_API_KEY")),
        },
        "storage": {
            "data_dir_exists": DATA_DIR.is_dir(),
            "upload_dir_exists": UPLOAD_DIR.is_dir(),
        },
    }

    degraded = not all(check["credentials_configured"] for check in (
        checks["llm_provider"], checks["video_provider"]
    ))
    if degraded:
        logger.warning("Health check: provider credentials missing, fallbacks will be used")

    return {
        "status": "degraded" if degraded else "healthy",
        "checks": checks,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "contentcraft.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=parse_bool_env(os.getenv("RELOAD"), default=False),
    )
