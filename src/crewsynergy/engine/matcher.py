"""Best-duo search over every unordered pair of crew members.

A pair's synergy score rewards both harmony (the pair's combined HAR and COM)
and complementarity (how different their profiles are):

    harmony    = HAR_a + HAR_b + COM_a + COM_b
    complement = sum over dimensions of |a[d] - b[d]|
    score      = harmony * 2 + complement

Teams are small, so all n*(n-1)/2 pairs are scored with no pruning.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from crewsynergy.engine.rounding import round_whole
from crewsynergy.model.stats import AttributeVector, StatKey

if TYPE_CHECKING:
    from crewsynergy.model.crew import Crew

logger = logging.getLogger(__name__)

HARMONY_WEIGHT = 2
MIN_DUO_MEMBERS = 2


class InsufficientMembersError(ValueError):
    """Raised when an operation needs more crew members than it was given."""

    def __init__(self, required: int, actual: int) -> None:
        self.required = required
        self.actual = actual
        super().__init__(f"At least {required} crew member(s) required, got {actual}")


@dataclass(frozen=True)
class PairScore:
    """Score breakdown for one pair."""

    harmony: float
    complement: float

    @property
    def total(self) -> float:
        return self.harmony * HARMONY_WEIGHT + self.complement


@dataclass(frozen=True)
class DuoResult:
    """The best pair, in the order the members appear in the team."""

    first: Crew
    second: Crew
    synergy_score: int
    harmony: float
    complement: float

    @property
    def duo(self) -> tuple[Crew, Crew]:
        return (self.first, self.second)

    def to_dict(self) -> dict[str, Any]:
        return {
            "duo": [self.first.to_dict(), self.second.to_dict()],
            "synergy_score": self.synergy_score,
            "harmony": self.harmony,
            "complement": self.complement,
        }


def score_vectors(a: AttributeVector, b: AttributeVector) -> PairScore:
    """Score two stat vectors."""
    harmony = a.har + b.har + a.com + b.com
    complement = sum(abs(a.get(key) - b.get(key)) for key in StatKey)
    return PairScore(harmony=harmony, complement=complement)


def score_pair(a: Crew, b: Crew) -> PairScore:
    """Score two crew members. Symmetric in its arguments."""
    return score_vectors(a.stats, b.stats)


def find_best_duo(members: Sequence[Crew]) -> DuoResult:
    """Find the pair of members with the highest synergy score.

    Pairs are visited in order (i ascending, then j ascending, i < j) and the
    best pair is replaced only on a strictly greater score, so the first pair
    to reach the maximum wins ties.

    Args:
        members: Team snapshot; order determines the tie-break.

    Returns:
        DuoResult with the winning pair and its score rounded to an integer.

    Raises:
        InsufficientMembersError: If fewer than two members are given.
    """
    count = len(members)
    if count < MIN_DUO_MEMBERS:
        raise InsufficientMembersError(MIN_DUO_MEMBERS, count)

    # Seeded with the first pair in enumeration order; later pairs must beat it.
    best = (0, 1)
    best_score = score_pair(members[0], members[1])

    for i in range(count):
        for j in range(i + 1, count):
            pair_score = score_pair(members[i], members[j])
            if pair_score.total > best_score.total:
                best = (i, j)
                best_score = pair_score

    first, second = members[best[0]], members[best[1]]
    logger.debug(
        "Best duo among %d members: %s + %s (score=%s)",
        count,
        first.name,
        second.name,
        best_score.total,
    )
    return DuoResult(
        first=first,
        second=second,
        synergy_score=round_whole(best_score.total),
        harmony=best_score.harmony,
        complement=best_score.complement,
    )


compute_best_duo = find_best_duo
