"""
Content Studio data model.

All entities are request-scoped value objects: one service call creates them
and the next replaces them. Attributes are snake_case in Python and camelCase
on the wire (``visualPrompt``) so the JSON contract consumed by the UI stays
unchanged.
"""

from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ============================================================
# Enums
# ============================================================

class ImageSize(str, Enum):
    """Thumbnail resolution accepted by the image model."""
    SIZE_1K = "1K"
    SIZE_2K = "2K"
    SIZE_4K = "4K"


class ResultMode(str, Enum):
    """Which path produced a service result."""
    LIVE = "live"          # Real provider response
    DEMO = "demo"          # No credential configured
    FALLBACK = "fallback"  # Credential present but the call or extraction failed


# ============================================================
# Domain Models
# ============================================================

class TrendItem(_CamelModel):
    """A trending search keyword"""
    keyword: str = Field(description="Trending keyword or phrase")
    category: str = Field(description="Topic category, e.g. Food, Events, Tech")
    volume: str = Field(description="Estimated search volume, e.g. 10k+")
    growth: float = Field(description="Estimated growth rate in percent")


class GroundingSource(_CamelModel):
    """A web citation returned by search grounding"""
    title: str
    uri: str


class MapPlace(_CamelModel):
    """A place returned by maps grounding"""
    title: str
    uri: str
    address: Optional[str] = None
    rating: Optional[float] = None


class ContentPlan(_CamelModel):
    """A short-video content plan for one keyword"""
    title: str
    hook: str
    body: str
    platforms: List[str] = Field(default_factory=list)
    hashtags: List[str] = Field(default_factory=list)
    visual_prompt: str
    sources: List[GroundingSource] = Field(default_factory=list)
    places: List[MapPlace] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """True once every text field needed to render the plan is filled in."""
        texts = (self.title, self.hook, self.body, self.visual_prompt)
        return all(text.strip() for text in texts) and bool(self.hashtags)


class LocationContext(_CamelModel):
    """A one-shot geolocation fix supplied by the caller."""
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class GeneratedImage(_CamelModel):
    """A generated (or placeholder) thumbnail"""
    url: str = Field(description="data: URI of the image")
    prompt: str
    size: ImageSize


class ServiceResult(_CamelModel, Generic[T]):
    """
    Envelope returned by every ContentService operation.

    ``value`` is always renderable; ``mode`` tells the caller whether it is
    live data or one of the two fallbacks.
    """
    value: T
    mode: ResultMode = ResultMode.LIVE
    error: Optional[str] = None

    @property
    def is_live(self) -> bool:
        return self.mode == ResultMode.LIVE


# ============================================================
# Response Schemas (sent to the model as response_schema)
# ============================================================

class PlanDraft(_CamelModel):
    """Schema-validated portion of a ContentPlan produced by the model"""
    title: str = Field(description="Catchy title for the content")
    hook: str = Field(description="The first 3 seconds hook script")
    body: str = Field(description="Main content description")
    platforms: List[str] = Field(description="Target platforms, e.g. Instagram Reels")
    hashtags: List[str] = Field(description="Hashtags including the # prefix")
    visual_prompt: str = Field(description="Prompt for image generation model (in English)")

    def to_plan(
        self,
        sources: List[GroundingSource],
        places: List[MapPlace],
    ) -> ContentPlan:
        return ContentPlan(
            title=self.title,
            hook=self.hook,
            body=self.body,
            platforms=list(self.platforms),
            hashtags=list(self.hashtags),
            visual_prompt=self.visual_prompt,
            sources=sources,
            places=places,
        )
