"""Deterministic scoring: stat derivation, team aggregation, duo matching."""

from crewsynergy.engine.aggregator import (
    GRADE_THRESHOLDS,
    Grade,
    TeamSummary,
    aggregate,
    classify_grade,
    compute_team_summary,
)
from crewsynergy.engine.deriver import (
    InvalidAttributeError,
    derive_stats,
    parse_archetype,
    parse_role,
)
from crewsynergy.engine.matcher import (
    DuoResult,
    InsufficientMembersError,
    PairScore,
    compute_best_duo,
    find_best_duo,
    score_pair,
    score_vectors,
)
from crewsynergy.engine.rounding import round_one_decimal, round_whole

__all__ = [
    "GRADE_THRESHOLDS",
    "DuoResult",
    "Grade",
    "InsufficientMembersError",
    "InvalidAttributeError",
    "PairScore",
    "TeamSummary",
    "aggregate",
    "classify_grade",
    "compute_best_duo",
    "compute_team_summary",
    "derive_stats",
    "find_best_duo",
    "parse_archetype",
    "parse_role",
    "round_one_decimal",
    "round_whole",
    "score_pair",
    "score_vectors",
]
