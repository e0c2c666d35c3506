"""
Deterministic fallback data.

Used when no credential is configured (demo mode) or when a live call fails,
so callers always receive a renderable object.
"""

from typing import List

from .models import (
    ContentPlan,
    GeneratedImage,
    GroundingSource,
    ImageSize,
    MapPlace,
    ResultMode,
    TrendItem,
)

MOCK_TRENDS: tuple[TrendItem, ...] = (
    TrendItem(keyword="탕후루 오마카세", category="Food", volume="50k+", growth=120),
    TrendItem(keyword="여름 뮤직 페스티벌", category="Events", volume="100k+", growth=85),
    TrendItem(keyword="AI 프로필 만들기", category="Tech", volume="20k+", growth=200),
    TrendItem(keyword="장마철 코디", category="Fashion", volume="30k+", growth=150),
    TrendItem(keyword="신상 편의점 간식", category="Food", volume="10k+", growth=90),
)

MOCK_PLAN = ContentPlan(
    title="집에서 즐기는 탕후루 오마카세 🍓",
    hook="아직도 줄 서서 드시나요? 10분 만에 집에서 만드는 탕후루 비법!",
    body=(
        "설탕 코팅이 얇고 바삭한 탕후루, 실패 없이 만드는 꿀팁을 알려드립니다. "
        "과일 손질부터 시럽 비율까지 완벽 정리!"
    ),
    platforms=["Instagram Reels", "YouTube Shorts", "TikTok"],
    hashtags=["#탕후루", "#홈카페", "#디저트만들기", "#간식", "#트렌드"],
    visual_prompt=(
        "Close up shot of colorful candied fruit tanghulu skewers, glistening sugar "
        "coating, bright cinematic lighting, 4k resolution"
    ),
    sources=[
        GroundingSource(title="Tanghulu Recipe - Wikipedia", uri="https://en.wikipedia.org/wiki/Tanghulu"),
        GroundingSource(title="Viral Food Trends 2024", uri="https://example.com/trends"),
    ],
    places=[
        MapPlace(title="Wangga Tanghulu", uri="https://maps.google.com", address="Hongdae, Seoul"),
        MapPlace(title="Street Food Zone", uri="https://maps.google.com", address="Myeongdong, Seoul"),
    ],
)

PLACEHOLDER_IMAGE = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' width='400' height='600' "
    "viewBox='0 0 400 600'%3E%3Crect width='100%25' height='100%25' fill='%231e293b'/%3E"
    "%3Ctext x='50%25' y='50%25' dominant-baseline='middle' text-anchor='middle' "
    "font-family='sans-serif' font-size='24' fill='%2394a3b8'%3EImage Generation%3C/text%3E"
    "%3Ctext x='50%25' y='55%25' dominant-baseline='middle' text-anchor='middle' "
    "font-family='sans-serif' font-size='16' fill='%2364748b'%3E(Mock Mode)%3C/text%3E%3C/svg%3E"
)

# Title markers shown to humans; programs should read ResultMode instead
MODE_LABELS = {
    ResultMode.DEMO: "Demo",
    ResultMode.FALLBACK: "Fallback",
}


def fallback_trends() -> List[TrendItem]:
    """Fresh list of the mock trends."""
    return list(MOCK_TRENDS)


def fallback_plan(keyword: str, mode: ResultMode) -> ContentPlan:
    """
    Mock plan retitled for the keyword and the degraded mode.

    Args:
        keyword: Keyword the caller asked about
        mode: DEMO (no credential) or FALLBACK (call failed)
    """
    if mode not in MODE_LABELS:
        raise ValueError(f"No fallback plan for mode {mode.value!r}")

    return MOCK_PLAN.model_copy(
        update={
            "title": f"{keyword} 콘텐츠 기획안 ({MODE_LABELS[mode]})",
            "platforms": list(MOCK_PLAN.platforms),
            "hashtags": list(MOCK_PLAN.hashtags),
            "sources": list(MOCK_PLAN.sources),
            "places": list(MOCK_PLAN.places),
        }
    )


def fallback_image(prompt: str, size: ImageSize) -> GeneratedImage:
    """Placeholder thumbnail; identical for demo and failure modes."""
    return GeneratedImage(url=PLACEHOLDER_IMAGE, prompt=prompt, size=size)
