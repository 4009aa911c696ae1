"""Tests for fallback narratives and error classification."""

import asyncio

import pytest

from crewsynergy.narrative.client import (
    NarrativeClientError,
    NarrativeRequest,
    OfflineNarrativeClient,
)
from crewsynergy.narrative.fallback import (
    DEFAULT_IMPROVEMENTS,
    DEFAULT_MISSION,
    DEFAULT_PERSONA,
    DEFAULT_STRENGTHS,
    FallbackReason,
    classify_error,
    default_duo_narrative,
    default_team_narrative,
)
from crewsynergy.narrative.response_parser import NarrativeParseError


class TestDefaultNarratives:
    """Tests for the default payloads."""

    def test_team_default(self) -> None:
        narrative = default_team_narrative()
        assert narrative.persona == DEFAULT_PERSONA == "Synergy Explorers"
        assert narrative.strengths == DEFAULT_STRENGTHS
        assert narrative.improvements == DEFAULT_IMPROVEMENTS
        assert len(narrative.strengths) == 3
        assert len(narrative.improvements) == 2

    def test_team_default_is_fresh(self) -> None:
        """Each call returns a new, equal object."""
        first = default_team_narrative()
        second = default_team_narrative()
        assert first == second
        assert first is not second

    def test_duo_default_names_both_members(self) -> None:
        narrative = default_duo_narrative("Mina", "Joon")
        assert narrative.synergy_reason == (
            "Mina and Joon can complement each other's strengths "
            "and build great synergy together."
        )
        assert narrative.mission == DEFAULT_MISSION

    def test_duo_default_order(self) -> None:
        narrative = default_duo_narrative("Joon", "Mina")
        assert narrative.synergy_reason.startswith("Joon and Mina")


class TestClassifyError:
    """Tests for classify_error."""

    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (
                NarrativeClientError(
                    "Narrative generation is disabled", reason=FallbackReason.DISABLED
                ),
                FallbackReason.DISABLED,
            ),
            (NarrativeParseError("Empty response"), FallbackReason.PARSE_ERROR),
            (NarrativeClientError("API request timed out: 30s"), FallbackReason.TIMEOUT),
            (TimeoutError(), FallbackReason.TIMEOUT),
            (NarrativeClientError("Rate limit exceeded: 429"), FallbackReason.RATE_LIMIT),
            (ConnectionError("refused"), FallbackReason.NETWORK_ERROR),
            (
                NarrativeClientError(
                    "OpenAI client not initialized. Check that OPENAI_API_KEY is set."
                ),
                FallbackReason.NO_API_KEY,
            ),
            (
                NarrativeClientError(
                    "API error: Internal server error", reason=FallbackReason.API_ERROR
                ),
                FallbackReason.API_ERROR,
            ),
            # The reason a client attaches wins over words in the message.
            (
                NarrativeClientError(
                    "API error: could not parse the JSON body", reason=FallbackReason.API_ERROR
                ),
                FallbackReason.API_ERROR,
            ),
            (
                NarrativeClientError(
                    "Connection error: timeout", reason=FallbackReason.NETWORK_ERROR
                ),
                FallbackReason.NETWORK_ERROR,
            ),
            (RuntimeError("could not parse the JSON body"), FallbackReason.UNKNOWN),
            (NarrativeClientError("API error: boom"), FallbackReason.UNKNOWN),
            (RuntimeError("boom"), FallbackReason.UNKNOWN),
        ],
    )
    def test_classification(self, error: Exception, expected: str) -> None:
        assert classify_error(error) == expected

    def test_offline_client_error_is_disabled(self) -> None:
        with pytest.raises(NarrativeClientError) as exc_info:
            asyncio.run(
                OfflineNarrativeClient().complete(NarrativeRequest(system_message="s", prompt="p"))
            )
        assert classify_error(exc_info.value) == FallbackReason.DISABLED
