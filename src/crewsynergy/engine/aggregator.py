"""Team aggregation: average stats, overall average and grade.

Summaries are recomputed from scratch on every call; nothing is cached or
updated incrementally.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from crewsynergy.engine.rounding import round_one_decimal, to_decimal
from crewsynergy.model.stats import STAT_DISPLAY_CEILING, AttributeVector, StatKey
from crewsynergy.model.tables import STAT_NAMES

if TYPE_CHECKING:
    from crewsynergy.model.crew import Crew

logger = logging.getLogger(__name__)


class Grade(StrEnum):
    """Team grade, lowest first."""

    C = "C"
    B = "B"
    A = "A"
    S = "S"
    SS = "SS"
    SSS = "SSS"

    @property
    def rank(self) -> int:
        return list(Grade).index(self)


# Lower bound of each band, highest band first.
GRADE_THRESHOLDS: tuple[tuple[float, Grade], ...] = (
    (12, Grade.SSS),
    (11, Grade.SS),
    (10, Grade.S),
    (9, Grade.A),
    (8, Grade.B),
)


def classify_grade(overall_average: float) -> Grade:
    """Map an overall average to its grade. Lower bounds are inclusive."""
    for threshold, grade in GRADE_THRESHOLDS:
        if overall_average >= threshold:
            return grade
    return Grade.C


@dataclass(frozen=True)
class TeamSummary:
    """Average stats of a team and the grade they earn."""

    team_size: int
    average: AttributeVector
    overall_average: float
    grade: Grade

    def radar_data(self) -> list[dict[str, Any]]:
        """Rows for a radar chart, one per dimension."""
        return [
            {
                "metric": STAT_NAMES[key],
                "key": key.value,
                "value": value,
                "full_mark": STAT_DISPLAY_CEILING,
            }
            for key, value in self.average.items()
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "team_size": self.team_size,
            "stats": self.average.to_dict(),
            "radar_data": self.radar_data(),
            "team_grade": self.grade.value,
            "avg_total": self.overall_average,
        }


def aggregate(members: Sequence[Crew]) -> TeamSummary:
    """Summarize a team.

    Each dimension is averaged independently and rounded half-up to one
    decimal. The overall average is the mean of those five rounded values,
    rounded the same way, and the grade is classified from it.

    An empty team yields the zero vector, overall average 0.0 and grade C.
    """
    count = len(members)
    if count == 0:
        return TeamSummary(
            team_size=0,
            average=AttributeVector.zero(),
            overall_average=0.0,
            grade=classify_grade(0.0),
        )

    averages: dict[str, float] = {}
    for key in StatKey:
        total = sum(to_decimal(member.stats.get(key)) for member in members)
        averages[key.value] = round_one_decimal(total / Decimal(count))
    average = AttributeVector.from_mapping(averages)

    overall = round_one_decimal(
        sum(to_decimal(value) for value in averages.values()) / Decimal(len(StatKey))
    )
    grade = classify_grade(overall)

    logger.debug("Aggregated %d members: overall=%s grade=%s", count, overall, grade.value)
    return TeamSummary(team_size=count, average=average, overall_average=overall, grade=grade)


compute_team_summary = aggregate
