"""
Schema-constrained request builders.

Each builder returns a GenerationRequest: model name, contents, and a
GenerateContentConfig carrying the response schema and grounding tools.
Nothing here performs I/O, so requests can be inspected in tests.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from google.genai import types

from core.config import Config

from .models import ImageSize, LocationContext, PlanDraft, TrendItem


@dataclass(frozen=True)
class GenerationRequest:
    """Arguments for one ``client.models.generate_content`` call."""
    operation: str
    model: str
    contents: Any
    config: types.GenerateContentConfig

    def as_kwargs(self) -> dict:
        return {"model": self.model, "contents": self.contents, "config": self.config}

    @property
    def tool_names(self) -> List[str]:
        """Names of attached grounding tools, in order."""
        names = []
        for tool in self.config.tools or []:
            if tool.google_search is not None:
                names.append("google_search")
            if tool.google_maps is not None:
                names.append("google_maps")
        return names


# ============================================================
# Prompts
# ============================================================

TRENDS_PROMPT = (
    "한국에서 오늘 가장 인기 있는 검색어와 SNS(인스타그램, 유튜브) 트렌드 키워드 5개를 찾아줘. "
    "각 트렌드의 예상 검색량(예: 10k+)과 성장률(%)을 추정해줘."
)

PLAN_SYSTEM_INSTRUCTION = (
    "당신은 전문 콘텐츠 마케터입니다. "
    "트렌드 키워드를 분석하여 바이럴 영상을 위한 기획안을 작성하세요."
)

PLAN_MAPS_INSTRUCTION = (
    " 이 트렌드는 특정 장소와 관련이 있을 수 있습니다. "
    "Google Maps를 사용하여 관련 장소를 찾고 추천하세요."
)


def plan_prompt(keyword: str) -> str:
    return f"""주제: "{keyword}"

이 주제를 바탕으로 인스타그램 릴스와 유튜브 쇼츠용 콘텐츠 기획안을 작성해주세요.
1. 현재 이 주제와 관련된 SNS 밈이나 챌린지가 있다면 연결해주세요.
2. 위치 기반 정보가 필요하다면 근처 핫플레이스를 추천해주세요.
3. 썸네일 생성을 위한 이미지 프롬프트를 영어로 작성해주세요 (visualPrompt).
"""


# ============================================================
# Builders
# ============================================================

def _search_tool() -> types.Tool:
    return types.Tool(google_search=types.GoogleSearch())


def _maps_tool() -> types.Tool:
    return types.Tool(google_maps=types.GoogleMaps())


def build_trends_request(config: Config) -> GenerationRequest:
    """Ask for today's five trending keywords, grounded on web search."""
    return GenerationRequest(
        operation="fetch_trends",
        model=config.models.text_model,
        contents=TRENDS_PROMPT,
        config=types.GenerateContentConfig(
            tools=[_search_tool()],
            response_mime_type="application/json",
            response_schema=list[TrendItem],
        ),
    )


def build_plan_request(
    config: Config,
    keyword: str,
    location: Optional[LocationContext] = None,
) -> GenerationRequest:
    """
    Ask for a short-video content plan for ``keyword``.

    A location adds the maps tool and pins its retrieval to the coordinate;
    without one only web search is attached.
    """
    tools = [_search_tool()]
    system_instruction = PLAN_SYSTEM_INSTRUCTION
    tool_config = None

    if location is not None:
        tools.append(_maps_tool())
        system_instruction += PLAN_MAPS_INSTRUCTION
        tool_config = types.ToolConfig(
            retrieval_config=types.RetrievalConfig(
                lat_lng=types.LatLng(latitude=location.lat, longitude=location.lng),
            ),
        )

    return GenerationRequest(
        operation="generate_plan",
        model=config.models.text_model,
        contents=plan_prompt(keyword),
        config=types.GenerateContentConfig(
            system_instruction=system_instruction,
            tools=tools,
            tool_config=tool_config,
            response_mime_type="application/json",
            response_schema=PlanDraft,
        ),
    )


def build_thumbnail_request(
    config: Config,
    prompt: str,
    size: ImageSize,
) -> GenerationRequest:
    """Ask the image model for a single vertical thumbnail."""
    return GenerationRequest(
        operation="generate_thumbnail",
        model=config.models.image_model,
        contents=[types.Part.from_text(text=prompt)],
        config=types.GenerateContentConfig(
            image_config=types.ImageConfig(
                aspect_ratio=config.thumbnail.aspect_ratio,
                image_size=size.value,
            ),
        ),
    )
