"""
Response extraction - turns raw Gemini responses into domain objects

Plan and trend bodies are decoded against the same pydantic models that were
sent as response_schema. Grounding chunks are classified into a closed set of
variants before being partitioned into sources and places.

Any missing or malformed content raises ExtractionFailure.
"""

import base64
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from .errors import ExtractionFailure
from .models import ContentPlan, GroundingSource, MapPlace, PlanDraft, TrendItem

_TREND_LIST = TypeAdapter(List[TrendItem])


# ============================================================
# Grounding chunk variants
# ============================================================

@dataclass(frozen=True)
class WebCitation:
    title: str
    uri: str


@dataclass(frozen=True)
class MapResult:
    title: str
    uri: str
    address: Optional[str] = None


@dataclass(frozen=True)
class UnrecognizedChunk:
    raw: Any


GroundingChunk = Union[WebCitation, MapResult, UnrecognizedChunk]


def _as_mapping(value: Any) -> dict:
    """Normalize SDK models and raw REST dicts to a plain dict."""
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    if hasattr(value, "model_dump"):
        return value.model_dump(exclude_none=True)
    return {}


def _first(data: dict, *keys: str) -> Optional[Any]:
    for key in keys:
        if data.get(key):
            return data[key]
    return None


def classify_chunk(chunk: Any) -> List[GroundingChunk]:
    """
    Tag one grounding chunk as web, maps, or unrecognized.

    A chunk carrying both shapes yields a web variant followed by a maps
    variant. A web entry without a uri cannot be cited and is ignored; a maps
    entry needs a title or a uri. Chunks with neither shape yield a single
    UnrecognizedChunk.
    """
    data = _as_mapping(chunk)
    tagged: List[GroundingChunk] = []

    web = _as_mapping(data.get("web"))
    if web.get("uri"):
        tagged.append(WebCitation(title=web.get("title") or web["uri"], uri=web["uri"]))

    maps = _as_mapping(data.get("maps"))
    maps_uri = _first(maps, "uri", "google_maps_uri", "googleMapsUri") or ""
    if maps.get("title") or maps_uri:
        tagged.append(MapResult(
            title=maps.get("title") or maps_uri,
            uri=maps_uri,
            address=_first(maps, "formatted_address", "formattedAddress", "address"),
        ))

    return tagged or [UnrecognizedChunk(raw=chunk)]


def _grounding_chunks(response: Any) -> list:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    if metadata is None:
        return []
    return list(getattr(metadata, "grounding_chunks", None) or [])


def extract_grounding(response: Any) -> Tuple[List[GroundingSource], List[MapPlace]]:
    """
    Partition grounding chunks into (sources, places), preserving order.

    Sources are de-duplicated by uri. Missing metadata yields two empty lists.
    """
    sources: List[GroundingSource] = []
    places: List[MapPlace] = []
    seen_uris = set()

    for chunk in _grounding_chunks(response):
        for tagged in classify_chunk(chunk):
            if isinstance(tagged, WebCitation):
                if tagged.uri in seen_uris:
                    continue
                seen_uris.add(tagged.uri)
                sources.append(GroundingSource(title=tagged.title, uri=tagged.uri))
            elif isinstance(tagged, MapResult):
                places.append(MapPlace(title=tagged.title, uri=tagged.uri, address=tagged.address))
            # UnrecognizedChunk: skipped

    return sources, places


# ============================================================
# Body decoding
# ============================================================

def _response_text(response: Any) -> str:
    try:
        text = response.text
    except (AttributeError, ValueError) as e:
        raise ExtractionFailure(f"Response has no text body: {e}") from e
    if not text or not text.strip():
        raise ExtractionFailure("Response text is empty")
    return text


def parse_trends(response: Any) -> List[TrendItem]:
    """Decode a trend list; an empty list counts as a failure."""
    text = _response_text(response)
    try:
        trends = _TREND_LIST.validate_json(text)
    except ValidationError as e:
        raise ExtractionFailure(f"Trend payload does not match schema: {e}") from e

    if not trends:
        raise ExtractionFailure("Trend payload is an empty list")
    return trends


def parse_plan(response: Any) -> ContentPlan:
    """
    Decode the plan body and attach grounding sources and places.

    Blank title, hook, body, visual prompt or an empty hashtag list make the
    plan unrenderable and count as a failure.
    """
    text = _response_text(response)
    try:
        draft = PlanDraft.model_validate_json(text)
    except ValidationError as e:
        raise ExtractionFailure(f"Plan payload does not match schema: {e}") from e

    sources, places = extract_grounding(response)
    plan = draft.to_plan(sources=sources, places=places)
    if not plan.is_complete:
        raise ExtractionFailure("Plan payload is incomplete")
    return plan


# ============================================================
# Image
# ============================================================

def _response_parts(response: Any) -> list:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return list(getattr(content, "parts", None) or [])


def extract_image(response: Any) -> str:
    """Return the first inline image part as a data URI."""
    for part in _response_parts(response):
        inline = getattr(part, "inline_data", None)
        if inline is None or not getattr(inline, "data", None):
            continue

        data = inline.data
        # The SDK decodes to bytes; raw REST payloads are already base64
        encoded = base64.b64encode(data).decode("ascii") if isinstance(data, bytes) else data
        mime_type = getattr(inline, "mime_type", None) or "image/png"
        return f"data:{mime_type};base64,{encoded}"

    raise ExtractionFailure("No image generated")
