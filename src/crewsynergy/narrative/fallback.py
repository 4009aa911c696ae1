"""Fallback narratives used when the provider is unavailable or misbehaves.

Every call builds a new payload; nothing here is shared with the success path.
"""

from __future__ import annotations

from crewsynergy.narrative.client import FallbackReason, NarrativeClientError
from crewsynergy.narrative.response_parser import NarrativeParseError
from crewsynergy.narrative.schemas import DuoNarrative, TeamNarrative

DEFAULT_PERSONA = "Synergy Explorers"
DEFAULT_STRENGTHS = (
    "A balanced team with a diverse range of skills",
    "Able to tackle problems from different perspectives",
    "A flexible collaboration style",
)
DEFAULT_IMPROVEMENTS = (
    "Clarify how roles are divided within the team",
    "Set aside regular time for team communication",
)
DUO_SYNERGY_TEMPLATE = (
    "{first} and {second} can complement each other's strengths "
    "and build great synergy together."
)
DEFAULT_MISSION = (
    "Spend 30 minutes at a cafe together talking about each other's hobbies and interests."
)


def default_team_narrative() -> TeamNarrative:
    """Generic team narrative."""
    return TeamNarrative(
        persona=DEFAULT_PERSONA,
        strengths=DEFAULT_STRENGTHS,
        improvements=DEFAULT_IMPROVEMENTS,
    )


def default_duo_narrative(first_name: str, second_name: str) -> DuoNarrative:
    """Generic duo narrative naming both members."""
    return DuoNarrative(
        synergy_reason=DUO_SYNERGY_TEMPLATE.format(first=first_name, second=second_name),
        mission=DEFAULT_MISSION,
    )


def classify_error(error: Exception) -> str:
    """Classify an exception into a fallback reason.

    Exceptions raised by this package carry their reason in their type or in
    NarrativeClientError.reason; only errors of unknown origin are classified
    by their message text.

    Args:
        error: The exception that occurred.

    Returns:
        A FallbackReason constant string.
    """
    if isinstance(error, NarrativeParseError):
        return FallbackReason.PARSE_ERROR
    if isinstance(error, NarrativeClientError) and error.reason is not None:
        return error.reason
    if isinstance(error, TimeoutError):
        return FallbackReason.TIMEOUT
    if isinstance(error, ConnectionError):
        return FallbackReason.NETWORK_ERROR
    return _classify_message(str(error).lower())


def _classify_message(message: str) -> str:
    if "timed out" in message or "timeout" in message:
        return FallbackReason.TIMEOUT
    if "rate limit" in message:
        return FallbackReason.RATE_LIMIT
    if any(term in message for term in ("connection", "network", "unreachable", "dns")):
        return FallbackReason.NETWORK_ERROR
    if any(term in message for term in ("api key", "api_key", "unauthorized")):
        return FallbackReason.NO_API_KEY
    return FallbackReason.UNKNOWN
