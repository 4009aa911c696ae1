"""Roster loading from JSON documents.

A roster is either a JSON list of entries or an object with a "crews" list.
Each entry needs a name, an archetype and a role; the camelCase keys
"characterType" and "jobRole" are accepted as well.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from crewsynergy.engine.deriver import InvalidAttributeError
from crewsynergy.model.team import Team

logger = logging.getLogger(__name__)


class RosterError(ValueError):
    """Raised when a roster document is malformed."""

    pass


class RosterEntry(BaseModel):
    """One crew member as written in a roster file.

    archetype and role stay plain strings here so that unknown values are
    reported by the stat deriver as InvalidAttributeError.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = Field(default=None, description="Optional stable member id")
    name: str = Field(min_length=1, description="Display name")
    archetype: str = Field(
        validation_alias=AliasChoices("archetype", "characterType"),
        description="Archetype value, e.g. 'speed-racer'",
    )
    role: str = Field(
        validation_alias=AliasChoices("role", "jobRole"),
        description="Role value, e.g. 'developer'",
    )


class Roster(BaseModel):
    crews: list[RosterEntry] = Field(default_factory=list)


def parse_roster(data: Any) -> Team:
    """Build a Team from decoded roster JSON.

    Raises:
        RosterError: If the document structure is invalid.
        InvalidAttributeError: If an entry has an unknown archetype or role.
    """
    if isinstance(data, list):
        data = {"crews": data}
    if not isinstance(data, dict):
        msg = f"Roster must be a list or an object with 'crews', got {type(data).__name__}"
        raise RosterError(msg)

    try:
        roster = Roster.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid roster: {e}"
        raise RosterError(msg) from e

    team = Team()
    for entry in roster.crews:
        try:
            team.add(entry.name, entry.archetype, entry.role, crew_id=entry.id)
        except InvalidAttributeError:
            raise
        except ValueError as e:
            # duplicate ids
            raise RosterError(str(e)) from e
    logger.info("Loaded roster with %d crew members", len(team))
    return team


def load_roster(path: str | Path) -> Team:
    """Read and parse a roster file.

    Raises:
        RosterError: If the file cannot be read or is not valid JSON.
        InvalidAttributeError: If an entry has an unknown archetype or role.
    """
    roster_path = Path(path)
    try:
        text = roster_path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Cannot read roster file {roster_path}: {e}"
        raise RosterError(msg) from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"Roster file {roster_path} is not valid JSON: {e}"
        raise RosterError(msg) from e
    return parse_roster(data)
