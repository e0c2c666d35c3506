"""
Configuration management for TrendPulse.

Centralizes all configuration including:
- API credentials for the generative backend
- Model selections
- Thumbnail rendering settings
- Input validation policy
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from .feature_flags import InputPolicy, get_input_policy


def _read_api_key() -> str:
    # API_KEY is what the hosted key-selection flow injects
    return os.getenv("GOOGLE_API_KEY") or os.getenv("API_KEY", "")


@dataclass
class APIConfig:
    """Credentials for the generative backend."""

    google_api_key: str = field(default_factory=_read_api_key)


@dataclass
class ModelConfig:
    """Model selection configuration."""

    # Structured text + grounding (search / maps)
    text_model: str = field(
        default_factory=lambda: os.getenv("TRENDPULSE_TEXT_MODEL", "gemini-2.5-flash")
    )
    # Thumbnail generation
    image_model: str = field(
        default_factory=lambda: os.getenv("TRENDPULSE_IMAGE_MODEL", "gemini-3-pro-image-preview")
    )


@dataclass
class ThumbnailConfig:
    """Thumbnail rendering settings."""

    # Vertical for Reels/Shorts
    aspect_ratio: str = field(
        default_factory=lambda: os.getenv("TRENDPULSE_ASPECT_RATIO", "9:16")
    )
    default_filename: str = "trendpulse-thumbnail.png"


@dataclass
class Config:
    """Main configuration class."""

    api: APIConfig = field(default_factory=APIConfig)
    models: ModelConfig = field(default_factory=ModelConfig)
    thumbnail: ThumbnailConfig = field(default_factory=ThumbnailConfig)
    input_policy: InputPolicy = field(default_factory=get_input_policy)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls()

    @property
    def has_credential(self) -> bool:
        return bool(self.api.google_api_key)

    def validate(self) -> list[str]:
        """Validate configuration and return list of issues."""
        issues = []

        if not self.api.google_api_key:
            issues.append("GOOGLE_API_KEY not configured (running in demo mode)")

        if not self.models.text_model:
            issues.append("TRENDPULSE_TEXT_MODEL is empty")

        if not self.models.image_model:
            issues.append("TRENDPULSE_IMAGE_MODEL is empty")

        if ":" not in self.thumbnail.aspect_ratio:
            issues.append(f"Invalid aspect ratio: {self.thumbnail.aspect_ratio!r}")

        return issues


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reload_config() -> Config:
    """Reload configuration from environment."""
    global _config
    _config = Config.from_env()
    return _config
