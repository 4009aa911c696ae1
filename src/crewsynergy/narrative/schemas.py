"""Narrative payload schemas.

Both models are frozen so a fallback payload can never be mutated by a caller
and leak into a later response.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StringConstraints

# Surrounding whitespace is stripped first, so "  " counts as empty.
NarrativeText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class TeamNarrative(BaseModel):
    """Narrative for a whole team."""

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    persona: NarrativeText = Field(description="Short thematic label for the team")
    strengths: tuple[NarrativeText, ...] = Field(
        min_length=1, description="Strength statements, in order"
    )
    improvements: tuple[NarrativeText, ...] = Field(
        min_length=1, description="Improvement statements, in order"
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "persona": self.persona,
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
        }


class DuoNarrative(BaseModel):
    """Narrative for a recommended duo."""

    model_config = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True, str_strip_whitespace=True
    )

    synergy_reason: NarrativeText = Field(
        validation_alias=AliasChoices("synergy_reason", "synergyReason"),
        description="Why the two members work well together",
    )
    mission: NarrativeText = Field(description="One short, concrete activity for the pair")

    def to_dict(self) -> dict[str, Any]:
        return {"synergy_reason": self.synergy_reason, "mission": self.mission}
