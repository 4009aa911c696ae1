"""Narrative generation: prompts, provider contract, parsing and fallbacks."""

from crewsynergy.narrative.client import (
    FallbackReason,
    NarrativeClient,
    NarrativeClientError,
    NarrativeRequest,
    OfflineNarrativeClient,
)
from crewsynergy.narrative.config import NarrativeConfig, get_narrative_config
from crewsynergy.narrative.fallback import (
    classify_error,
    default_duo_narrative,
    default_team_narrative,
)
from crewsynergy.narrative.prompt_builder import (
    PromptBuilder,
    archetype_distribution,
    role_distribution,
)
from crewsynergy.narrative.response_parser import NarrativeParseError, NarrativeParser
from crewsynergy.narrative.schemas import DuoNarrative, TeamNarrative
from crewsynergy.narrative.service import NarrativeService

__all__ = [
    "DuoNarrative",
    "FallbackReason",
    "NarrativeClient",
    "NarrativeClientError",
    "NarrativeConfig",
    "NarrativeParseError",
    "NarrativeParser",
    "NarrativeRequest",
    "NarrativeService",
    "OfflineNarrativeClient",
    "PromptBuilder",
    "TeamNarrative",
    "archetype_distribution",
    "classify_error",
    "default_duo_narrative",
    "default_team_narrative",
    "get_narrative_config",
    "role_distribution",
]
