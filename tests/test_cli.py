"""Tests for the command-line interface."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from crewsynergy.cli import EXIT_INVALID_INPUT, EXIT_OK, main
from crewsynergy.narrative.fallback import DEFAULT_MISSION, DEFAULT_PERSONA

ROSTER = [
    {"id": "c1", "name": "Mina", "archetype": "speed-racer", "role": "developer"},
    {"id": "c2", "name": "Joon", "archetype": "deep-diver", "role": "planner"},
    {"id": "c3", "name": "Sora", "archetype": "super-connector", "role": "marketing"},
    {"id": "c4", "name": "Hana", "archetype": "peace-maker", "role": "hr"},
]


def _write(tmp_path: Path, data: object) -> str:
    path = tmp_path / "roster.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestStatsCommand:
    """Tests for `crewsynergy stats`."""

    def test_outputs_summary(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["stats", _write(tmp_path, ROSTER)])

        assert exit_code == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["team_size"] == 4
        assert data["team_grade"] == "C"
        assert data["avg_total"] == 7.3

    def test_empty_roster(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """An empty team still has a defined summary."""
        exit_code = main(["stats", _write(tmp_path, [])])

        assert exit_code == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["team_size"] == 0
        assert data["team_grade"] == "C"


class TestDuoCommand:
    """Tests for `crewsynergy duo`."""

    def test_outputs_best_duo(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["duo", _write(tmp_path, {"crews": ROSTER})])

        assert exit_code == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert len(data["duo"]) == 2
        assert isinstance(data["synergy_score"], int)

    def test_single_member(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["duo", _write(tmp_path, ROSTER[:1])])

        assert exit_code == EXIT_INVALID_INPUT
        assert "At least 2" in capsys.readouterr().err


class TestNarrativeCommands:
    """Tests for `analyze` and `recommend` in offline mode."""

    def test_analyze_offline(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["analyze", _write(tmp_path, ROSTER), "--offline"])

        assert exit_code == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["persona"] == DEFAULT_PERSONA
        assert data["team_grade"] == "C"

    def test_recommend_offline(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["recommend", _write(tmp_path, ROSTER), "--offline"])

        assert exit_code == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["mission"] == DEFAULT_MISSION
        first, second = (crew["name"] for crew in data["duo"])
        assert data["synergy_reason"].startswith(f"{first} and {second}")

    @pytest.mark.parametrize("command", ["analyze", "recommend"])
    def test_closes_narrative_service(self, command: str, tmp_path: Path) -> None:
        with patch(
            "crewsynergy.cli.NarrativeService.aclose", new_callable=AsyncMock
        ) as mock_aclose:
            assert main([command, _write(tmp_path, ROSTER), "--offline"]) == EXIT_OK
        mock_aclose.assert_awaited_once()

    def test_closes_service_when_analysis_fails(self, tmp_path: Path) -> None:
        with (
            patch("crewsynergy.cli.NarrativeService.aclose", new_callable=AsyncMock) as mock_aclose,
            patch("crewsynergy.cli.analyze_team", side_effect=RuntimeError("boom")),
            pytest.raises(RuntimeError, match="boom"),
        ):
            main(["analyze", _write(tmp_path, ROSTER), "--offline"])
        mock_aclose.assert_awaited_once()


class TestInvalidInput:
    """Invalid input exits with code 2."""

    def test_unknown_archetype(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        roster = [{"name": "X", "archetype": "lone-wolf", "role": "developer"}]
        exit_code = main(["stats", _write(tmp_path, roster)])

        assert exit_code == EXIT_INVALID_INPUT
        assert "lone-wolf" in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["stats", str(tmp_path / "missing.json")])

        assert exit_code == EXIT_INVALID_INPUT
        assert "error: Cannot read roster file" in capsys.readouterr().err

    def test_no_command(self) -> None:
        """argparse exits when no subcommand is given."""
        with pytest.raises(SystemExit):
            main([])
