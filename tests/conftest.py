"""Shared fixtures and helpers for crewsynergy tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from crewsynergy.model.crew import Crew
from crewsynergy.model.stats import AttributeVector
from crewsynergy.model.tables import Archetype, Role
from crewsynergy.narrative.config import NarrativeConfig


def make_crew(
    name: str,
    spd: float,
    det: float,
    com: float,
    har: float,
    cre: float,
    archetype: Archetype = Archetype.SPEED_RACER,
    role: Role = Role.DEVELOPER,
) -> Crew:
    """Build a crew member with explicit stats, bypassing derivation."""
    return Crew(
        id=name.lower(),
        name=name,
        archetype=archetype,
        role=role,
        stats=AttributeVector(spd=spd, det=det, com=com, har=har, cre=cre),
    )


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo configure_logging() so caplog keeps working across tests."""
    yield
    logger = logging.getLogger("crewsynergy")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def offline_config() -> NarrativeConfig:
    """Config with no API key and no .env file."""
    return NarrativeConfig(_env_file=None, openai_api_key=None)


@pytest.fixture
def sample_crews() -> list[Crew]:
    """Four members with derived stats, one per archetype."""
    return [
        Crew.create("Mina", Archetype.SPEED_RACER, Role.DEVELOPER, crew_id="c1"),
        Crew.create("Joon", Archetype.DEEP_DIVER, Role.PLANNER, crew_id="c2"),
        Crew.create("Sora", Archetype.SUPER_CONNECTOR, Role.MARKETING, crew_id="c3"),
        Crew.create("Hana", Archetype.PEACE_MAKER, Role.HR, crew_id="c4"),
    ]
