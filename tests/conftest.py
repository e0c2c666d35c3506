"""Shared fixtures for content service tests."""

import os
import sys
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import APIConfig, Config
from core.feature_flags import InputPolicy
from services.content_studio import ContentService, StaticCredentialProvider


def build_response(text=None, chunks=None, parts=None, candidates=True):
    """Minimal stand-in for a GenerateContentResponse."""
    if not candidates:
        return SimpleNamespace(text=text, candidates=[])

    metadata = None
    if chunks is not None:
        metadata = SimpleNamespace(grounding_chunks=chunks)

    candidate = SimpleNamespace(
        content=SimpleNamespace(parts=parts or []),
        grounding_metadata=metadata,
    )
    return SimpleNamespace(text=text, candidates=[candidate])


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def live_config():
    return Config(api=APIConfig(google_api_key="test-key"), input_policy=InputPolicy.FORWARD)


@pytest.fixture
def demo_config():
    return Config(api=APIConfig(google_api_key=""), input_policy=InputPolicy.FORWARD)


@pytest.fixture
def mock_client():
    """Gemini client whose generate_content is a MagicMock."""
    client = MagicMock()
    client.models.generate_content = MagicMock()
    return client


@pytest.fixture
def live_service(mock_client, live_config):
    return ContentService(provider=StaticCredentialProvider(mock_client), config=live_config)


@pytest.fixture
def demo_service(demo_config):
    return ContentService(provider=StaticCredentialProvider(None), config=demo_config)


@pytest.fixture
def plan_payload():
    return (
        '{"title": "페스티벌 200% 즐기기", "hook": "이거 모르고 가면 손해!", '
        '"body": "준비물부터 동선까지 정리했습니다.", '
        '"platforms": ["Instagram Reels", "YouTube Shorts"], '
        '"hashtags": ["#페스티벌", "#여름"], '
        '"visualPrompt": "Crowd at an outdoor summer music festival at sunset"}'
    )


@pytest.fixture
def trends_payload():
    return (
        '[{"keyword": "빙수 맛집", "category": "Food", "volume": "40k+", "growth": 130},'
        ' {"keyword": "워터밤", "category": "Events", "volume": "90k+", "growth": 75.5}]'
    )
