"""Narrative client interface.

A narrative client turns a system message and a user prompt into one block
of free text. Transport, authentication and timeouts are the client's
business; callers only see text or a NarrativeClientError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field


class FallbackReason:
    """Constants for fallback activation reasons."""

    DISABLED = "disabled"
    TIMEOUT = "timeout"
    RATE_LIMIT = "rate_limit"
    API_ERROR = "api_error"
    NETWORK_ERROR = "network_error"
    NO_API_KEY = "no_api_key"
    EMPTY_RESPONSE = "empty_response"
    PARSE_ERROR = "parse_error"
    UNKNOWN = "unknown"


class NarrativeClientError(Exception):
    """Raised when a narrative client cannot produce a response.

    Attributes:
        reason: FallbackReason constant set by the client that raised, or None
            when the client could not tell.
    """

    def __init__(self, message: str, reason: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason


class NarrativeRequest(BaseModel):
    """Prompt pair sent to a narrative provider.

    Attributes:
        system_message: Instructions that set the model's behavior and output format.
        prompt: User content describing the team or duo.
    """

    model_config = ConfigDict(frozen=True)

    system_message: str = Field(description="System instructions")
    prompt: str = Field(description="User content")


class NarrativeClient(ABC):
    """Abstract base class for narrative providers.

    Example:
        class EchoClient(NarrativeClient):
            async def complete(self, request: NarrativeRequest) -> str:
                return request.prompt
    """

    @abstractmethod
    async def complete(self, request: NarrativeRequest) -> str:
        """Send the request and return the raw response text.

        Raises:
            NarrativeClientError: If the provider fails (timeout, rate limit,
                missing credentials, empty response, etc.).
        """
        raise NotImplementedError("Subclasses must implement complete()")

    async def aclose(self) -> None:
        """Release transport resources. Clients without any keep the no-op."""
        return None


class OfflineNarrativeClient(NarrativeClient):
    """Client used when narratives are disabled. Every call fails, so every
    narrative comes from the fallback defaults."""

    async def complete(self, request: NarrativeRequest) -> str:
        raise NarrativeClientError(
            "Narrative generation is disabled", reason=FallbackReason.DISABLED
        )
