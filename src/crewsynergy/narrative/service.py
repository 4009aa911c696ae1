"""Narrative service: prompt -> provider -> parse, with mandatory fallback.

The service never raises because of the provider. Any client error, parse
error or unexpected exception while producing a narrative is logged and
replaced by the fixed default payload, so callers always receive a complete
narrative.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from crewsynergy.narrative.client import NarrativeClient, OfflineNarrativeClient
from crewsynergy.narrative.config import NarrativeConfig, get_narrative_config
from crewsynergy.narrative.fallback import (
    classify_error,
    default_duo_narrative,
    default_team_narrative,
)
from crewsynergy.narrative.prompt_builder import PromptBuilder
from crewsynergy.narrative.response_parser import NarrativeParser
from crewsynergy.narrative.schemas import DuoNarrative, TeamNarrative

if TYPE_CHECKING:
    from crewsynergy.engine.aggregator import TeamSummary
    from crewsynergy.model.crew import Crew

logger = logging.getLogger(__name__)


class NarrativeService:
    """Generates team and duo narratives.

    Coordinates the flow: prompt_builder -> client -> parser, falling back to
    the default payloads on any failure. Holds no per-request state, so team
    and duo narratives can be awaited concurrently.

    Example:
        >>> service = NarrativeService()
        >>> narrative = await service.generate_team_narrative(members, aggregate(members))
        >>> narrative.persona
    """

    def __init__(
        self,
        client: NarrativeClient | None = None,
        prompt_builder: PromptBuilder | None = None,
        parser: NarrativeParser | None = None,
        config: NarrativeConfig | None = None,
    ) -> None:
        """Initialize the service with optional dependency injection.

        Args:
            client: Narrative client. If not provided, one is created from config.
            prompt_builder: Prompt builder instance. Defaults to PromptBuilder().
            parser: Response parser instance. Defaults to NarrativeParser().
            config: Narrative configuration. If not provided, loads from environment.
        """
        self._config = config or get_narrative_config()
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._parser = parser or NarrativeParser()
        self._client = client or self._create_client()

    def _create_client(self) -> NarrativeClient:
        if not self._config.narrative_enabled:
            logger.info("Narrative generation disabled; using fallback narratives")
            return OfflineNarrativeClient()

        from crewsynergy.narrative.providers.openai import OpenAINarrativeClient

        return OpenAINarrativeClient(self._config)

    async def generate_team_narrative(
        self, members: Sequence[Crew], summary: TeamSummary
    ) -> TeamNarrative:
        """Generate a team narrative, or the default one if anything fails."""
        request = self._prompt_builder.build_team_request(members, summary)
        try:
            text = await self._client.complete(request)
            return self._parser.parse_team(text)
        except Exception as e:
            self._log_fallback("team", e)
            return default_team_narrative()

    async def generate_duo_narrative(self, first: Crew, second: Crew) -> DuoNarrative:
        """Generate a duo narrative, or the default one if anything fails."""
        request = self._prompt_builder.build_duo_request(first, second)
        try:
            text = await self._client.complete(request)
            return self._parser.parse_duo(text)
        except Exception as e:
            self._log_fallback("duo", e)
            return default_duo_narrative(first.name, second.name)

    async def aclose(self) -> None:
        """Close the narrative client."""
        await self._client.aclose()

    def _log_fallback(self, narrative: str, error: Exception) -> None:
        reason = classify_error(error)
        logger.warning(
            "%s narrative unavailable (%s): %s; using fallback",
            narrative.capitalize(),
            reason,
            error,
            extra={"fallback_reason": reason, "narrative": narrative},
        )
