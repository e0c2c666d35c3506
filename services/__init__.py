"""
TrendPulse Services

- content_studio: trends, content plans and thumbnails via Gemini
- api: FastAPI server for the browser UI
"""

from .content_studio import ContentService, ResultMode, ServiceResult

__all__ = [
    "ContentService",
    "ResultMode",
    "ServiceResult",
]
