"""
Content Service - the single entry point for trend, plan and thumbnail generation

Every operation makes at most one Gemini call and never raises. The result
envelope says which path produced the value:
    LIVE      - real provider response
    DEMO      - no credential configured
    FALLBACK  - credential present but the call or extraction failed

Usage:
    service = ContentService()
    result = await service.generate_plan("여름 페스티벌", LocationContext(lat=37.5, lng=127.0))
    if result.mode == ResultMode.DEMO:
        ...
"""

import asyncio
import logging
from typing import Any, List, Optional

from core.config import Config, get_config
from core.feature_flags import should_reject_empty_input

from .errors import CallFailure, ContentServiceError, CredentialAbsent, InvalidInput
from .extractor import extract_image, parse_plan, parse_trends
from .fallback import fallback_image, fallback_plan, fallback_trends
from .models import (
    ContentPlan,
    GeneratedImage,
    ImageSize,
    LocationContext,
    ResultMode,
    ServiceResult,
    TrendItem,
)
from .provider import CredentialProvider, EnvCredentialProvider
from .request_builder import (
    GenerationRequest,
    build_plan_request,
    build_thumbnail_request,
    build_trends_request,
)

logger = logging.getLogger(__name__)


def _degraded_mode(error: Exception) -> ResultMode:
    return ResultMode.DEMO if isinstance(error, CredentialAbsent) else ResultMode.FALLBACK


def _log_degraded(operation: str, error: Exception) -> None:
    if isinstance(error, CredentialAbsent):
        logger.info(f"No API key found, returning mock data for {operation}")
    elif isinstance(error, ContentServiceError):
        logger.error(f"{operation} failed, using fallback: {error}")
    else:
        logger.exception(f"Unexpected error in {operation}, using fallback")


class ContentService:
    """
    Facade over the Gemini-backed content operations.

    The credential provider is injected so hosts can decide how keys are
    selected; by default the key is read from the environment.
    """

    def __init__(
        self,
        provider: Optional[CredentialProvider] = None,
        config: Optional[Config] = None,
    ):
        self.config = config or get_config()
        self.provider = provider or EnvCredentialProvider(self.config)

    # ------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------

    def is_available(self) -> bool:
        """Whether live calls can be attempted."""
        return self.provider.is_available()

    def request_credential(self) -> bool:
        """Ask the host to select an API key."""
        return self.provider.request_selection()

    # ------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------

    async def fetch_trends(self) -> ServiceResult[List[TrendItem]]:
        """Today's five trending keywords, or the mock list."""
        try:
            response = await self._call(build_trends_request(self.config))
            trends = parse_trends(response)
        except Exception as e:
            _log_degraded("fetch_trends", e)
            return ServiceResult[List[TrendItem]](
                value=fallback_trends(),
                mode=_degraded_mode(e),
                error=str(e),
            )

        logger.info(f"Fetched {len(trends)} live trends")
        return ServiceResult[List[TrendItem]](value=trends)

    async def generate_plan(
        self,
        keyword: str,
        location: Optional[LocationContext] = None,
    ) -> ServiceResult[ContentPlan]:
        """
        Generate a short-video content plan for a keyword.

        Args:
            keyword: Trend keyword chosen by the user
            location: Optional coordinate; enables maps grounding near it

        Returns:
            ServiceResult whose plan always has title, hook, body and visual prompt
        """
        try:
            self._check_input(keyword, "Keyword is empty")
            response = await self._call(build_plan_request(self.config, keyword, location))
            plan = parse_plan(response)
        except Exception as e:
            _log_degraded("generate_plan", e)
            mode = _degraded_mode(e)
            return ServiceResult[ContentPlan](
                value=fallback_plan(keyword, mode),
                mode=mode,
                error=str(e),
            )

        logger.info(
            f"Generated plan '{plan.title}' "
            f"({len(plan.sources)} sources, {len(plan.places)} places)"
        )
        return ServiceResult[ContentPlan](value=plan)

    async def generate_thumbnail(
        self,
        prompt: str,
        size: ImageSize = ImageSize.SIZE_1K,
    ) -> ServiceResult[GeneratedImage]:
        """
        Generate a vertical thumbnail image.

        The placeholder image is returned in both degraded modes. If the
        backend rejects the selected key's project, the host is asked to
        select a key again before the placeholder is returned.
        """
        size = ImageSize(size)
        try:
            self._check_input(prompt, "Prompt is empty")
            response = await self._call(build_thumbnail_request(self.config, prompt, size))
            url = extract_image(response)
        except Exception as e:
            _log_degraded("generate_thumbnail", e)
            if isinstance(e, CallFailure) and e.is_entity_not_found:
                logger.warning("Selected API key was rejected, requesting a new one")
                self.provider.request_selection()
            return ServiceResult[GeneratedImage](
                value=fallback_image(prompt, size),
                mode=_degraded_mode(e),
                error=str(e),
            )

        return ServiceResult[GeneratedImage](
            value=GeneratedImage(url=url, prompt=prompt, size=size)
        )

    # ------------------------------------------------------------
    # Provider call
    # ------------------------------------------------------------

    def _check_input(self, value: str, message: str) -> None:
        """Credential absence wins over the empty-input policy (DEMO, not FALLBACK)."""
        if not self.provider.is_available():
            raise CredentialAbsent()
        if should_reject_empty_input(value, self.config.input_policy):
            raise InvalidInput(message)

    async def _call(self, request: GenerationRequest) -> Any:
        """Issue one generate_content call; provider errors become CallFailure."""
        client = self.provider.get_client()

        try:
            return await asyncio.to_thread(
                client.models.generate_content,
                **request.as_kwargs(),
            )
        except Exception as e:
            raise CallFailure(request.operation, e) from e
