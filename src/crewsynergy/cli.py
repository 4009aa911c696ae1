"""Command-line interface for crewsynergy."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from crewsynergy import __version__
from crewsynergy.analysis import analyze_team, recommend_duo
from crewsynergy.engine.aggregator import aggregate
from crewsynergy.engine.deriver import InvalidAttributeError
from crewsynergy.engine.matcher import InsufficientMembersError, find_best_duo
from crewsynergy.logging_config import configure_logging
from crewsynergy.model.crew import Crew
from crewsynergy.model.roster import RosterError, load_roster
from crewsynergy.narrative.client import OfflineNarrativeClient
from crewsynergy.narrative.service import NarrativeService

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crewsynergy",
        description="Team synergy scoring and best-duo recommendations",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: LOG_LEVEL env var or INFO)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    stats = subparsers.add_parser("stats", help="Team average stats and grade")
    stats.add_argument("roster", help="Path to a roster JSON file")

    duo = subparsers.add_parser("duo", help="Best duo and synergy score")
    duo.add_argument("roster", help="Path to a roster JSON file")

    for name, help_text in (
        ("analyze", "Team stats with a generated narrative"),
        ("recommend", "Best duo with a generated synergy story and mission"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("roster", help="Path to a roster JSON file")
        sub.add_argument(
            "--offline",
            action="store_true",
            help="Skip the narrative provider and use the default narratives",
        )

    return parser


def _service(offline: bool) -> NarrativeService:
    if offline:
        return NarrativeService(client=OfflineNarrativeClient())
    return NarrativeService()


async def _narrate(command: str, members: tuple[Crew, ...], offline: bool) -> dict[str, Any]:
    service = _service(offline)
    try:
        if command == "analyze":
            return (await analyze_team(members, service)).to_dict()
        return (await recommend_duo(members, service)).to_dict()
    finally:
        await service.aclose()


def _run(parsed: argparse.Namespace) -> dict[str, Any]:
    members = load_roster(parsed.roster).snapshot()

    if parsed.command == "stats":
        return aggregate(members).to_dict()
    if parsed.command == "duo":
        return find_best_duo(members).to_dict()
    return asyncio.run(_narrate(parsed.command, members, parsed.offline))


def main(args: list[str] | None = None) -> int:
    """Run the crewsynergy CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, 2 for invalid input).
    """
    parsed = _build_parser().parse_args(args)

    level = getattr(logging, parsed.log_level) if parsed.log_level else None
    configure_logging(level=level)

    try:
        result = _run(parsed)
    except (RosterError, InvalidAttributeError, InsufficientMembersError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
