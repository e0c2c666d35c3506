"""
Credential providers - decide whether a Gemini client is available

The content service never reads API keys itself. It asks a provider:
    provider.is_available()      -> is a usable credential selected?
    provider.request_selection() -> ask the host to (re)select one
    provider.get_client()        -> lazily built genai.Client

Usage:
    from services.content_studio.provider import EnvCredentialProvider

    provider = EnvCredentialProvider()
    if provider.is_available():
        client = provider.get_client()
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from google import genai

from core.config import Config, get_config, reload_config

from .errors import CredentialAbsent

logger = logging.getLogger(__name__)


class CredentialProvider(ABC):
    """Host-side credential selection, injected into ContentService."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether a usable credential is currently selected."""

    @abstractmethod
    def request_selection(self) -> bool:
        """Prompt the host to select a credential. Returns availability afterwards."""

    @abstractmethod
    def get_client(self) -> genai.Client:
        """Return a client, raising CredentialAbsent if none can be built."""


class EnvCredentialProvider(CredentialProvider):
    """Reads the API key from configuration (GOOGLE_API_KEY / API_KEY)."""

    def __init__(self, config: Optional[Config] = None):
        self._config = config
        self._client: Optional[genai.Client] = None

    @property
    def config(self) -> Config:
        return self._config or get_config()

    def is_available(self) -> bool:
        return self.config.has_credential

    def request_selection(self) -> bool:
        """Re-read the environment, picking up a newly exported key."""
        self._config = reload_config()
        self._client = None
        if self.is_available():
            logger.info("API key selected")
            return True
        logger.info("No API key found; export GOOGLE_API_KEY to leave demo mode")
        return False

    def get_client(self) -> genai.Client:
        """Get or create the Gemini client (lazy-loaded)."""
        if self._client is None:
            if not self.is_available():
                raise CredentialAbsent()
            self._client = genai.Client(api_key=self.config.api.google_api_key)
        return self._client


class StaticCredentialProvider(CredentialProvider):
    """Wraps an already-built client; ``None`` means demo mode."""

    def __init__(self, client: Optional[genai.Client] = None):
        self._client = client
        self.selection_requests = 0

    def is_available(self) -> bool:
        return self._client is not None

    def request_selection(self) -> bool:
        self.selection_requests += 1
        return self.is_available()

    def get_client(self) -> genai.Client:
        if self._client is None:
            raise CredentialAbsent()
        return self._client
