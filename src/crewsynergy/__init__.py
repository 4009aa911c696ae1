"""crewsynergy - team synergy scoring and duo recommendations."""

from crewsynergy.engine import (
    DuoResult,
    Grade,
    InsufficientMembersError,
    InvalidAttributeError,
    TeamSummary,
    compute_best_duo,
    compute_team_summary,
    derive_stats,
)
from crewsynergy.logging_config import configure_logging

__version__ = "0.1.0"

__all__ = [
    "DuoResult",
    "Grade",
    "InsufficientMembersError",
    "InvalidAttributeError",
    "TeamSummary",
    "__version__",
    "compute_best_duo",
    "compute_team_summary",
    "configure_logging",
    "derive_stats",
]
