"""Domain model: AttributeVector, Archetype, Role, Crew, Team, roster loading."""

from crewsynergy.model.crew import Crew
from crewsynergy.model.roster import RosterEntry, RosterError, load_roster, parse_roster
from crewsynergy.model.stats import STAT_DISPLAY_CEILING, AttributeVector, StatKey
from crewsynergy.model.tables import (
    ARCHETYPE_NAMES,
    ARCHETYPE_STATS,
    ROLE_BONUS,
    ROLE_NAMES,
    STAT_NAMES,
    Archetype,
    Role,
)
from crewsynergy.model.team import Team

__all__ = [
    "ARCHETYPE_NAMES",
    "ARCHETYPE_STATS",
    "ROLE_BONUS",
    "ROLE_NAMES",
    "STAT_DISPLAY_CEILING",
    "STAT_NAMES",
    "Archetype",
    "AttributeVector",
    "Crew",
    "Role",
    "RosterEntry",
    "RosterError",
    "StatKey",
    "Team",
    "load_roster",
    "parse_roster",
]
