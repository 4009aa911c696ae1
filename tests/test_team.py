"""Tests for Crew and Team."""

import dataclasses

import pytest

from crewsynergy.engine.aggregator import aggregate
from crewsynergy.engine.deriver import InvalidAttributeError, derive_stats
from crewsynergy.engine.matcher import find_best_duo
from crewsynergy.model.crew import Crew
from crewsynergy.model.stats import AttributeVector
from crewsynergy.model.tables import Archetype, Role
from crewsynergy.model.team import Team


class TestCrew:
    """Tests for Crew."""

    def test_create_derives_stats(self) -> None:
        """Stats come from derive_stats."""
        crew = Crew.create("Mina", "speed-racer", "developer")
        assert crew.archetype is Archetype.SPEED_RACER
        assert crew.role is Role.DEVELOPER
        assert crew.stats == AttributeVector(spd=12, det=6, com=6, har=4, cre=7)
        assert crew.stats == derive_stats(crew.archetype, crew.role)

    def test_create_generates_unique_ids(self) -> None:
        """Ids default to fresh unique values."""
        a = Crew.create("A", Archetype.DEEP_DIVER, Role.HR)
        b = Crew.create("A", Archetype.DEEP_DIVER, Role.HR)
        assert a.id != b.id
        assert a.stats == b.stats

    def test_create_keeps_explicit_id(self) -> None:
        crew = Crew.create("A", Archetype.DEEP_DIVER, Role.HR, crew_id="fixed")
        assert crew.id == "fixed"

    def test_create_rejects_invalid_values(self) -> None:
        with pytest.raises(InvalidAttributeError):
            Crew.create("A", "wizard", Role.HR)

    def test_is_immutable(self) -> None:
        """Members are never edited in place."""
        crew = Crew.create("A", Archetype.DEEP_DIVER, Role.HR)
        with pytest.raises(dataclasses.FrozenInstanceError):
            crew.role = Role.DEVELOPER  # type: ignore[misc]

    def test_to_dict(self) -> None:
        crew = Crew.create("Hana", Archetype.PEACE_MAKER, Role.HR, crew_id="c4")
        assert crew.to_dict() == {
            "id": "c4",
            "name": "Hana",
            "archetype": "peace-maker",
            "role": "hr",
            "stats": {"SPD": 4, "DET": 6, "COM": 8, "HAR": 14, "CRE": 3},
        }


class TestTeam:
    """Tests for Team."""

    def test_add_and_order(self) -> None:
        """Members keep insertion order."""
        team = Team(name="Core")
        team.add("A", Archetype.SPEED_RACER, Role.DEVELOPER)
        team.add("B", Archetype.DEEP_DIVER, Role.PLANNER)
        team.add("C", Archetype.PEACE_MAKER, Role.HR)
        assert [crew.name for crew in team] == ["A", "B", "C"]
        assert len(team) == 3

    def test_remove(self) -> None:
        """Removing returns the member and drops it from the team."""
        team = Team()
        a = team.add("A", Archetype.SPEED_RACER, Role.DEVELOPER)
        b = team.add("B", Archetype.DEEP_DIVER, Role.PLANNER)
        assert team.remove(a.id) is a
        assert team.snapshot() == (b,)

    def test_remove_unknown(self) -> None:
        with pytest.raises(KeyError):
            Team().remove("missing")

    def test_duplicate_id_rejected(self) -> None:
        team = Team()
        team.add("A", Archetype.SPEED_RACER, Role.DEVELOPER, crew_id="x")
        with pytest.raises(ValueError, match="already on the team"):
            team.add("B", Archetype.DEEP_DIVER, Role.PLANNER, crew_id="x")

    def test_invalid_add_leaves_team_unchanged(self) -> None:
        team = Team()
        with pytest.raises(InvalidAttributeError):
            team.add("A", Archetype.SPEED_RACER, "intern")
        assert len(team) == 0

    def test_get(self) -> None:
        team = Team()
        a = team.add("A", Archetype.SPEED_RACER, Role.DEVELOPER, crew_id="a")
        assert team.get("a") is a
        assert team.get("b") is None

    def test_snapshot_is_isolated(self) -> None:
        """Later changes do not affect an earlier snapshot."""
        team = Team()
        team.add("A", Archetype.SPEED_RACER, Role.DEVELOPER)
        snapshot = team.snapshot()
        team.add("B", Archetype.DEEP_DIVER, Role.PLANNER)
        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    def test_from_members(self, sample_crews: list[Crew]) -> None:
        team = Team.from_members(sample_crews, name="Sample")
        assert team.snapshot() == tuple(sample_crews)
        assert team.name == "Sample"

    def test_engine_accepts_snapshot(self, sample_crews: list[Crew]) -> None:
        """Aggregator and matcher work on the same snapshot."""
        snapshot = Team.from_members(sample_crews).snapshot()
        assert aggregate(snapshot).team_size == 4
        assert find_best_duo(snapshot).synergy_score > 0
