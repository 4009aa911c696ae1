"""Stat derivation: archetype base stats plus role bonus.

derive_stats is the single place member stats come from, so every caller
(team building, roster loading, CLI) sees identical vectors for the same
archetype and role.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TypeVar

from crewsynergy.model.stats import AttributeVector
from crewsynergy.model.tables import ARCHETYPE_STATS, Archetype, Role, role_bonus_vector

E = TypeVar("E", bound=StrEnum)


class InvalidAttributeError(ValueError):
    """Raised when an archetype or role is outside its closed set."""

    def __init__(self, field: str, value: object, allowed: list[str]) -> None:
        self.field = field
        self.value = value
        self.allowed = allowed
        super().__init__(f"Invalid {field} {value!r}; expected one of: {', '.join(allowed)}")


def _coerce(enum_cls: type[E], value: object, field: str) -> E:
    if isinstance(value, enum_cls):
        return value
    allowed = [member.value for member in enum_cls]
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    raise InvalidAttributeError(field, value, allowed)


def parse_archetype(value: Archetype | str) -> Archetype:
    """Validate and convert an archetype value.

    Raises:
        InvalidAttributeError: If value is not a known archetype.
    """
    return _coerce(Archetype, value, "archetype")


def parse_role(value: Role | str) -> Role:
    """Validate and convert a role value.

    Raises:
        InvalidAttributeError: If value is not a known role.
    """
    return _coerce(Role, value, "role")


def derive_stats(archetype: Archetype | str, role: Role | str) -> AttributeVector:
    """Compute a member's stats from archetype and role.

    Args:
        archetype: Archetype member or its string value (e.g. "speed-racer").
        role: Role member or its string value (e.g. "developer").

    Returns:
        New AttributeVector equal to the archetype's base stats with the
        role's bonus added per dimension.

    Raises:
        InvalidAttributeError: If either value is outside its closed set.
    """
    base = ARCHETYPE_STATS[parse_archetype(archetype)]
    return base.plus(role_bonus_vector(parse_role(role)))
