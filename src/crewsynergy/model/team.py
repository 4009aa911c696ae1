"""Team: the ordered collection that owns its crew members."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from crewsynergy.model.crew import Crew
from crewsynergy.model.tables import Archetype, Role

logger = logging.getLogger(__name__)


@dataclass
class Team:
    """Ordered crew collection.

    Insertion order is display order; it also fixes the duo tie-break. The
    scoring engine only ever sees the immutable tuple returned by snapshot().
    """

    name: str = ""
    members: list[Crew] = field(default_factory=list)

    @classmethod
    def from_members(cls, members: Iterable[Crew], name: str = "") -> Team:
        team = cls(name=name)
        for member in members:
            team.add_member(member)
        return team

    def add(
        self,
        name: str,
        archetype: Archetype | str,
        role: Role | str,
        crew_id: str | None = None,
    ) -> Crew:
        """Create a member and append it to the team.

        Raises:
            InvalidAttributeError: If archetype or role is unknown.
            ValueError: If crew_id is already on the team.
        """
        return self.add_member(Crew.create(name, archetype, role, crew_id=crew_id))

    def add_member(self, member: Crew) -> Crew:
        """Append an existing member.

        Raises:
            ValueError: If a member with the same id is already on the team.
        """
        if self.get(member.id) is not None:
            msg = f"Crew member '{member.id}' is already on the team"
            raise ValueError(msg)
        self.members.append(member)
        logger.debug("Added %s (%s/%s) to team", member.name, member.archetype, member.role)
        return member

    def remove(self, crew_id: str) -> Crew:
        """Remove a member by id.

        Raises:
            KeyError: If no member has that id.
        """
        for index, member in enumerate(self.members):
            if member.id == crew_id:
                del self.members[index]
                logger.debug("Removed %s from team", member.name)
                return member
        raise KeyError(crew_id)

    def get(self, crew_id: str) -> Crew | None:
        for member in self.members:
            if member.id == crew_id:
                return member
        return None

    def snapshot(self) -> tuple[Crew, ...]:
        """Immutable view of the current members, in order."""
        return tuple(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Crew]:
        return iter(self.snapshot())
