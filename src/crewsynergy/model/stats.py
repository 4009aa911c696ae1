"""AttributeVector: the five-dimensional stat profile of a crew member or team."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

# Radar charts are drawn against this ceiling; values above it are still valid.
STAT_DISPLAY_CEILING = 15


class StatKey(StrEnum):
    """The five stat dimensions, in canonical order."""

    SPD = "SPD"  # execution speed
    DET = "DET"  # precision
    COM = "COM"  # communication
    HAR = "HAR"  # harmony
    CRE = "CRE"  # creativity

    @property
    def field_name(self) -> str:
        """Attribute name on AttributeVector."""
        return self.value.lower()


@dataclass(frozen=True)
class AttributeVector:
    """Immutable five-dimensional stat profile.

    Every dimension is always present and never negative. Derived member
    stats are integers; team averages carry one decimal.
    """

    spd: float
    det: float
    com: float
    har: float
    cre: float

    def __post_init__(self) -> None:
        for key in StatKey:
            value = getattr(self, key.field_name)
            if value < 0:
                msg = f"Stat {key.value} must be non-negative, got {value}"
                raise ValueError(msg)

    @classmethod
    def zero(cls) -> AttributeVector:
        """The all-zero vector."""
        return cls(spd=0, det=0, com=0, har=0, cre=0)

    @classmethod
    def from_mapping(cls, values: dict[str, float]) -> AttributeVector:
        """Build a vector from a mapping keyed by StatKey values.

        Missing keys count as zero; unknown keys raise ValueError.
        """
        unknown = set(values) - {key.value for key in StatKey}
        if unknown:
            msg = f"Unknown stat keys: {sorted(unknown)}"
            raise ValueError(msg)
        return cls(**{key.field_name: values.get(key.value, 0) for key in StatKey})

    def get(self, key: StatKey) -> float:
        return getattr(self, key.field_name)

    def items(self) -> list[tuple[StatKey, float]]:
        """(key, value) pairs in canonical order."""
        return [(key, self.get(key)) for key in StatKey]

    def plus(self, other: AttributeVector) -> AttributeVector:
        """Dimension-wise sum."""
        return AttributeVector(
            spd=self.spd + other.spd,
            det=self.det + other.det,
            com=self.com + other.com,
            har=self.har + other.har,
            cre=self.cre + other.cre,
        )

    def top_stat(self) -> tuple[StatKey, float]:
        """Highest dimension; the earliest in canonical order wins ties."""
        return max(self.items(), key=lambda item: item[1])

    def bottom_stat(self) -> tuple[StatKey, float]:
        """Lowest dimension; the latest in canonical order wins ties."""
        return min(reversed(self.items()), key=lambda item: item[1])

    def to_dict(self) -> dict[str, Any]:
        return {key.value: value for key, value in self.items()}
