"""
Content Studio Service

Turns trending keywords into short-video content plans and thumbnails using
Gemini with search and maps grounding:
- fetch_trends: today's trending keywords
- generate_plan: hook, body, hashtags, sources and nearby places
- generate_thumbnail: vertical thumbnail image

Every operation degrades to deterministic mock data instead of raising.
"""

from .errors import CallFailure, ContentServiceError, CredentialAbsent, ExtractionFailure, InvalidInput
from .models import (
    ContentPlan,
    GeneratedImage,
    GroundingSource,
    ImageSize,
    LocationContext,
    MapPlace,
    ResultMode,
    ServiceResult,
    TrendItem,
)
from .provider import CredentialProvider, EnvCredentialProvider, StaticCredentialProvider
from .service import ContentService

__all__ = [
    "ContentService",
    # Providers
    "CredentialProvider",
    "EnvCredentialProvider",
    "StaticCredentialProvider",
    # Models
    "ContentPlan",
    "GeneratedImage",
    "GroundingSource",
    "ImageSize",
    "LocationContext",
    "MapPlace",
    "ResultMode",
    "ServiceResult",
    "TrendItem",
    # Errors
    "ContentServiceError",
    "CredentialAbsent",
    "CallFailure",
    "ExtractionFailure",
    "InvalidInput",
]
