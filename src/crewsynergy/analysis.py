"""Combined results: computed stats merged with their narratives."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from crewsynergy.engine.aggregator import TeamSummary, aggregate
from crewsynergy.engine.matcher import DuoResult, InsufficientMembersError, find_best_duo
from crewsynergy.model.crew import Crew
from crewsynergy.narrative.schemas import DuoNarrative, TeamNarrative
from crewsynergy.narrative.service import NarrativeService

logger = logging.getLogger(__name__)

MIN_ANALYSIS_MEMBERS = 1


@dataclass(frozen=True)
class TeamAnalysis:
    summary: TeamSummary
    narrative: TeamNarrative

    def to_dict(self) -> dict[str, Any]:
        return {
            "team_stats": self.summary.average.to_dict(),
            "team_grade": self.summary.grade.value,
            "avg_total": self.summary.overall_average,
            **self.narrative.to_dict(),
        }


@dataclass(frozen=True)
class DuoRecommendation:
    result: DuoResult
    narrative: DuoNarrative

    def to_dict(self) -> dict[str, Any]:
        return {**self.result.to_dict(), **self.narrative.to_dict()}


async def analyze_team(members: Sequence[Crew], service: NarrativeService) -> TeamAnalysis:
    """Summarize a team and attach its narrative.

    Raises:
        InsufficientMembersError: If the team is empty.
    """
    snapshot = tuple(members)
    if len(snapshot) < MIN_ANALYSIS_MEMBERS:
        raise InsufficientMembersError(MIN_ANALYSIS_MEMBERS, len(snapshot))

    summary = aggregate(snapshot)
    narrative = await service.generate_team_narrative(snapshot, summary)
    logger.info("Analyzed team of %d (grade %s)", summary.team_size, summary.grade.value)
    return TeamAnalysis(summary=summary, narrative=narrative)


async def recommend_duo(members: Sequence[Crew], service: NarrativeService) -> DuoRecommendation:
    """Find the best duo and attach its narrative.

    Raises:
        InsufficientMembersError: If fewer than two members are given.
    """
    snapshot = tuple(members)
    result = find_best_duo(snapshot)
    narrative = await service.generate_duo_narrative(result.first, result.second)
    logger.info(
        "Recommended duo %s + %s (score %d)",
        result.first.name,
        result.second.name,
        result.synergy_score,
    )
    return DuoRecommendation(result=result, narrative=narrative)
