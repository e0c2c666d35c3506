"""
TrendPulse HTTP Server

FastAPI server exposing the content service to the browser UI:
- GET /trends - Today's trending keywords
- POST /plan - Content plan for a keyword (optional location)
- POST /thumbnail - Vertical thumbnail image
- GET /credentials - Whether an API key is selected
- POST /credentials/select - Ask the host to (re)select an API key
- GET /health - Health check

Every content endpoint answers 200 with a result envelope; degraded paths are
reported in its ``mode`` field rather than as HTTP errors.

Usage:
    python -m uvicorn services.api.server:app --host 0.0.0.0 --port 8765

    # Or via main.py
    python main.py server
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends, FastAPI
from pydantic import BaseModel

from core.config import get_config
from core.feature_flags import get_policy_status
from services.content_studio import (
    ContentPlan,
    ContentService,
    GeneratedImage,
    ImageSize,
    LocationContext,
    ServiceResult,
    TrendItem,
)

logger = logging.getLogger(__name__)

_service: Optional[ContentService] = None


def get_service() -> ContentService:
    """Shared ContentService instance (overridable in tests)."""
    global _service
    if _service is None:
        _service = ContentService()
    return _service


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting TrendPulse server...")
    for issue in get_config().validate():
        logger.warning(f"Config: {issue}")

    yield

    logger.info("Shutting down TrendPulse server...")


app = FastAPI(
    title="TrendPulse",
    description="Trend discovery, content planning and thumbnail generation",
    version="1.0.0",
    lifespan=lifespan,
)


# ============================================================
# Request / Response Models
# ============================================================

class PlanRequest(BaseModel):
    keyword: str
    location: Optional[LocationContext] = None


class ThumbnailRequest(BaseModel):
    prompt: str
    size: ImageSize = ImageSize.SIZE_1K


class CredentialStatus(BaseModel):
    available: bool


# ============================================================
# Endpoints
# ============================================================

@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "TrendPulse",
        "version": "1.0.0",
        "endpoints": {
            "GET /trends": "Trending keywords",
            "POST /plan": "Content plan for a keyword",
            "POST /thumbnail": "Thumbnail image for a prompt",
            "GET /credentials": "API key status",
            "POST /credentials/select": "Request API key selection",
            "GET /health": "Health check",
        },
    }


@app.get("/health")
async def health(service: ContentService = Depends(get_service)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "live": service.is_available(),
        "input_policy": get_policy_status()["policy"],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/trends", response_model=ServiceResult[List[TrendItem]])
async def trends(service: ContentService = Depends(get_service)):
    """Trending keywords (mock list in demo or fallback mode)."""
    return await service.fetch_trends()


@app.post("/plan", response_model=ServiceResult[ContentPlan])
async def plan(request: PlanRequest, service: ContentService = Depends(get_service)):
    """Content plan for a keyword; a location enables nearby place lookup."""
    return await service.generate_plan(request.keyword, request.location)


@app.post("/thumbnail", response_model=ServiceResult[GeneratedImage])
async def thumbnail(request: ThumbnailRequest, service: ContentService = Depends(get_service)):
    """Thumbnail as a data URI (placeholder in demo or fallback mode)."""
    return await service.generate_thumbnail(request.prompt, request.size)


@app.get("/credentials", response_model=CredentialStatus)
async def credentials(service: ContentService = Depends(get_service)):
    """Whether an API key is currently selected."""
    return CredentialStatus(available=service.is_available())


@app.post("/credentials/select", response_model=CredentialStatus)
async def select_credentials(service: ContentService = Depends(get_service)):
    """Ask the host to select an API key, then report availability."""
    return CredentialStatus(available=service.request_credential())
