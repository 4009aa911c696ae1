"""Static archetype and role tables.

Archetypes carry a full base stat vector; roles carry a partial bonus that is
added on top. Both tables are read-only and built once at import.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

from crewsynergy.model.stats import AttributeVector, StatKey


class Archetype(StrEnum):
    """Personality-style category of a crew member."""

    SPEED_RACER = "speed-racer"
    DEEP_DIVER = "deep-diver"
    SUPER_CONNECTOR = "super-connector"
    PEACE_MAKER = "peace-maker"


class Role(StrEnum):
    """Job function of a crew member."""

    DEVELOPER = "developer"
    PLANNER = "planner"
    DESIGNER = "designer"
    HR = "hr"
    MARKETING = "marketing"


ARCHETYPE_STATS: MappingProxyType[Archetype, AttributeVector] = MappingProxyType(
    {
        Archetype.SPEED_RACER: AttributeVector(spd=10, det=3, com=6, har=4, cre=7),
        Archetype.DEEP_DIVER: AttributeVector(spd=3, det=10, com=4, har=6, cre=7),
        Archetype.SUPER_CONNECTOR: AttributeVector(spd=7, det=4, com=10, har=6, cre=8),
        Archetype.PEACE_MAKER: AttributeVector(spd=4, det=6, com=7, har=10, cre=3),
    }
)

ROLE_BONUS: MappingProxyType[Role, MappingProxyType[StatKey, int]] = MappingProxyType(
    {
        Role.DEVELOPER: MappingProxyType({StatKey.DET: 3, StatKey.SPD: 2}),
        Role.PLANNER: MappingProxyType({StatKey.DET: 2, StatKey.COM: 3}),
        Role.DESIGNER: MappingProxyType({StatKey.CRE: 4, StatKey.DET: 1}),
        Role.HR: MappingProxyType({StatKey.HAR: 4, StatKey.COM: 1}),
        Role.MARKETING: MappingProxyType({StatKey.COM: 3, StatKey.SPD: 2}),
    }
)

# Labels used in narrative prompts.
ARCHETYPE_NAMES: MappingProxyType[Archetype, str] = MappingProxyType(
    {
        Archetype.SPEED_RACER: "Speed Racer",
        Archetype.DEEP_DIVER: "Deep Diver",
        Archetype.SUPER_CONNECTOR: "Super Connector",
        Archetype.PEACE_MAKER: "Peace Maker",
    }
)

ROLE_NAMES: MappingProxyType[Role, str] = MappingProxyType(
    {
        Role.DEVELOPER: "Developer",
        Role.PLANNER: "Planner",
        Role.DESIGNER: "Designer",
        Role.HR: "HR",
        Role.MARKETING: "Marketing",
    }
)

STAT_NAMES: MappingProxyType[StatKey, str] = MappingProxyType(
    {
        StatKey.SPD: "Execution",
        StatKey.DET: "Precision",
        StatKey.COM: "Communication",
        StatKey.HAR: "Harmony",
        StatKey.CRE: "Creativity",
    }
)


def role_bonus_vector(role: Role) -> AttributeVector:
    """Expand a role's partial bonus into a full vector (absent dimensions are 0)."""
    bonus = ROLE_BONUS[role]
    return AttributeVector.from_mapping({key.value: delta for key, delta in bonus.items()})
