"""Crew member record."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any

from crewsynergy.engine.deriver import derive_stats, parse_archetype, parse_role
from crewsynergy.model.stats import AttributeVector
from crewsynergy.model.tables import Archetype, Role


@dataclass(frozen=True)
class Crew:
    """A single team member.

    Stats are derived once from archetype and role at creation. Members are
    never edited; changing archetype or role means removing and re-adding.
    """

    id: str
    name: str
    archetype: Archetype
    role: Role
    stats: AttributeVector

    @classmethod
    def create(
        cls,
        name: str,
        archetype: Archetype | str,
        role: Role | str,
        crew_id: str | None = None,
    ) -> Crew:
        """Create a member, deriving its stats.

        Raises:
            InvalidAttributeError: If archetype or role is unknown.
        """
        parsed_archetype = parse_archetype(archetype)
        parsed_role = parse_role(role)
        return cls(
            id=crew_id or uuid.uuid4().hex,
            name=name,
            archetype=parsed_archetype,
            role=parsed_role,
            stats=derive_stats(parsed_archetype, parsed_role),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "archetype": self.archetype.value,
            "role": self.role.value,
            "stats": self.stats.to_dict(),
        }
