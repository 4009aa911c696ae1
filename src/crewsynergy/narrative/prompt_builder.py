"""Prompt builder for team and duo narratives.

Turns computed stats into the system message and user prompt sent to the
narrative provider. The system messages pin the JSON shape that
NarrativeParser expects back.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import TYPE_CHECKING

from crewsynergy.model.tables import ARCHETYPE_NAMES, ROLE_NAMES, STAT_NAMES
from crewsynergy.narrative.client import NarrativeRequest

if TYPE_CHECKING:
    from crewsynergy.engine.aggregator import TeamSummary
    from crewsynergy.model.crew import Crew


def role_distribution(members: Sequence[Crew]) -> dict[str, int]:
    """Member count per role label, in order of first appearance."""
    return dict(Counter(ROLE_NAMES[member.role] for member in members))


def archetype_distribution(members: Sequence[Crew]) -> dict[str, int]:
    """Member count per archetype label, in order of first appearance."""
    return dict(Counter(ARCHETYPE_NAMES[member.archetype] for member in members))


def _format_counts(counts: dict[str, int]) -> str:
    return ", ".join(f"{label} x{count}" for label, count in counts.items())


def _format_stats(member: Crew) -> str:
    return " | ".join(f"{STAT_NAMES[key]} {value}" for key, value in member.stats.items())


class PromptBuilder:
    """Builds narrative requests from crews and computed stats.

    Example:
        >>> builder = PromptBuilder()
        >>> request = builder.build_team_request(members, aggregate(members))
        >>> request.system_message.startswith("You are")
        True
    """

    TEAM_SYSTEM_MESSAGE = """You are a witty, creative team synergy analyst. Every analysis you write is fresh and original.

Rules:
1. The persona is an inventive nickname that reflects the team's character.
2. Strengths refer concretely to the team's makeup and stats.
3. Improvements are practical advice the team can actually use.
4. Never reuse phrasing from earlier analyses.
5. Keep a light, upbeat tone that suits a startup or tech workplace.

Respond ONLY with JSON in exactly this format:
{
  "persona": "creative team nickname",
  "strengths": ["specific strength 1", "specific strength 2", "specific strength 3"],
  "improvements": ["practical improvement 1", "practical improvement 2"]
}"""

    DUO_SYSTEM_MESSAGE = """You are a playful, creative team chemistry analyst. You explain why two people click and suggest a fun activity for them.

Rules:
1. The synergy explanation mentions both people's archetypes and roles.
2. The mission is a concrete, fun activity that takes 10-15 minutes.
3. Pick the mission category at random: cafe visit, quick game, photo walk, snack swap, short walk, quiz, hobby share, etc.
4. Suggest a different mission every time.
5. Keep the mission realistic for an ordinary office.

Respond ONLY with JSON in exactly this format:
{
  "synergy_reason": "2-3 fun, specific sentences about the pair's chemistry",
  "mission": "a concrete ice-breaking mission including place, time and how"
}"""

    def build_team_prompt(self, members: Sequence[Crew], summary: TeamSummary) -> str:
        """Build the user prompt for a team narrative.

        Includes each member's name, archetype and role, the role and archetype
        distributions, per-dimension averages, the top and bottom dimension and
        the grade.
        """
        roster = "\n".join(
            f"- {member.name}: {ARCHETYPE_NAMES[member.archetype]} ({ROLE_NAMES[member.role]})"
            for member in members
        )
        averages = ", ".join(
            f"{STAT_NAMES[key]}: {value}" for key, value in summary.average.items()
        )
        top_key, top_value = summary.average.top_stat()
        bottom_key, bottom_value = summary.average.bottom_stat()

        parts = [
            "Team analysis request",
            f"Members ({len(members)}):\n{roster}",
            f"Role distribution: {_format_counts(role_distribution(members))}\n"
            f"Archetype distribution: {_format_counts(archetype_distribution(members))}",
            f"Team average stats:\n{averages}",
            f"Highest stat: {STAT_NAMES[top_key]} ({top_value})\n"
            f"Lowest stat: {STAT_NAMES[bottom_key]} ({bottom_value})",
            f"Team grade: {summary.grade.value}",
            "Describe the synergy that makes this team unique!",
        ]
        return "\n\n".join(parts)

    def build_duo_prompt(self, first: Crew, second: Crew) -> str:
        """Build the user prompt for a duo narrative."""
        parts = ["Best duo chemistry request"]
        for label, member in (("First crew member", first), ("Second crew member", second)):
            top_key, top_value = member.stats.top_stat()
            parts.append(
                f"{label}: {member.name}\n"
                f"- Archetype: {ARCHETYPE_NAMES[member.archetype]}\n"
                f"- Role: {ROLE_NAMES[member.role]}\n"
                f"- Top stat: {STAT_NAMES[top_key]} ({top_value})\n"
                f"- All stats: {_format_stats(member)}"
            )
        parts.append(
            "Explain these two people's chemistry and suggest a fun mission they can do today!"
        )
        return "\n\n".join(parts)

    def build_team_request(
        self, members: Sequence[Crew], summary: TeamSummary
    ) -> NarrativeRequest:
        return NarrativeRequest(
            system_message=self.TEAM_SYSTEM_MESSAGE,
            prompt=self.build_team_prompt(members, summary),
        )

    def build_duo_request(self, first: Crew, second: Crew) -> NarrativeRequest:
        return NarrativeRequest(
            system_message=self.DUO_SYSTEM_MESSAGE,
            prompt=self.build_duo_prompt(first, second),
        )
