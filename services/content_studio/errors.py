"""
Failure classes raised inside the content service.

None of these escape ContentService: the facade catches them and returns
fallback data instead.
"""


class ContentServiceError(Exception):
    """Base class for content service failures."""


class CredentialAbsent(ContentServiceError):
    """No provider client is available (no credential selected)."""

    def __init__(self, message: str = "No API key configured"):
        super().__init__(message)


class CallFailure(ContentServiceError):
    """The provider call raised or returned a non-success response."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} call failed: {cause}")

    @property
    def is_entity_not_found(self) -> bool:
        """Whether the backend rejected the selected key's project/model."""
        return "Requested entity was not found" in str(self.cause)


class ExtractionFailure(ContentServiceError):
    """The response arrived but did not carry the expected content."""


class InvalidInput(ContentServiceError):
    """Blank keyword or prompt refused locally by the input policy."""
