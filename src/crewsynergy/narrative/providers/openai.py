"""OpenAI narrative client.

Uses the official openai SDK's async client to run one chat completion per
narrative request.
"""

from __future__ import annotations

import logging
from typing import Any

import openai
from openai import (
    APIConnectionError,
    APIError,
    APITimeoutError,
    AuthenticationError,
    RateLimitError,
)

from crewsynergy.narrative.client import (
    FallbackReason,
    NarrativeClient,
    NarrativeClientError,
    NarrativeRequest,
)
from crewsynergy.narrative.config import NarrativeConfig, get_narrative_config

logger = logging.getLogger(__name__)


class OpenAINarrativeClient(NarrativeClient):
    """Narrative client backed by OpenAI chat completions.

    Example:
        >>> client = OpenAINarrativeClient()
        >>> text = await client.complete(NarrativeRequest(
        ...     system_message="You are a team synergy analyst.",
        ...     prompt="Team analysis request ...",
        ... ))
    """

    # No retries: a failed request goes straight to the fallback narrative.
    MAX_RETRIES = 0

    def __init__(self, config: NarrativeConfig | None = None) -> None:
        """Initialize the client.

        Args:
            config: Optional NarrativeConfig. If not provided, loads from environment.
        """
        self._config = config or get_narrative_config()
        self._client: openai.AsyncOpenAI | None = None
        self._initialize_client()

    def _initialize_client(self) -> None:
        api_key = self._config.get_api_key()
        if not api_key:
            logger.warning("No OpenAI API key configured. Narratives will use fallbacks.")
            self._client = None
            return

        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=self._config.narrative_timeout,
            max_retries=self.MAX_RETRIES,
        )

    async def complete(self, request: NarrativeRequest) -> str:
        """Run a chat completion and return the message text.

        Raises:
            NarrativeClientError: If the client is not configured or the call fails.
        """
        if not self._client:
            raise NarrativeClientError(
                "OpenAI client not initialized. Check that OPENAI_API_KEY is set.",
                reason=FallbackReason.NO_API_KEY,
            )

        model = self._config.narrative_model
        messages = self._build_messages(request)

        try:
            logger.debug("Querying OpenAI model %s (%d prompt chars)", model, len(request.prompt))
            response = await self._client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=self._config.narrative_temperature,
                max_tokens=self._config.narrative_max_tokens,
            )
        except APITimeoutError as e:
            logger.error("OpenAI API timeout after %s seconds", self._config.narrative_timeout)
            raise NarrativeClientError(
                f"API request timed out: {e}", reason=FallbackReason.TIMEOUT
            ) from e
        except APIConnectionError as e:
            logger.error("OpenAI API connection failed: %s", e.message)
            raise NarrativeClientError(
                f"Connection error: {e.message}", reason=FallbackReason.NETWORK_ERROR
            ) from e
        except RateLimitError as e:
            logger.error("OpenAI API rate limit exceeded")
            raise NarrativeClientError(
                f"Rate limit exceeded: {e}", reason=FallbackReason.RATE_LIMIT
            ) from e
        except AuthenticationError as e:
            logger.error("OpenAI API rejected the API key")
            raise NarrativeClientError(
                f"Authentication failed: {e.message}", reason=FallbackReason.NO_API_KEY
            ) from e
        except APIError as e:
            logger.error("OpenAI API error: %s", e.message)
            raise NarrativeClientError(
                f"API error: {e.message}", reason=FallbackReason.API_ERROR
            ) from e

        return self._extract_text(response)

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        if self._client is not None:
            await self._client.close()
            self._client = None

    def _build_messages(self, request: NarrativeRequest) -> list[dict[str, Any]]:
        return [
            {"role": "system", "content": request.system_message},
            {"role": "user", "content": request.prompt},
        ]

    def _extract_text(self, response: Any) -> str:
        if not response.choices:
            raise NarrativeClientError(
                "Empty response from OpenAI API", reason=FallbackReason.EMPTY_RESPONSE
            )

        choice = response.choices[0]
        if not choice.message or not choice.message.content:
            raise NarrativeClientError(
                "Empty message content from OpenAI API", reason=FallbackReason.EMPTY_RESPONSE
            )

        return choice.message.content
