"""Half-up decimal rounding shared by the aggregator and matcher.

Values are rounded on their exact decimal representation, so 9.25 becomes
9.3 (Python's round() would give 9.2).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

ONE_DECIMAL = Decimal("0.1")
WHOLE = Decimal("1")


def to_decimal(value: int | float | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() gives the shortest repr, so 9.25 stays 9.25 rather than 9.2499...
    return Decimal(str(value))


def round_one_decimal(value: int | float | Decimal) -> float:
    """Round half-up to one decimal place."""
    return float(to_decimal(value).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP))


def round_whole(value: int | float | Decimal) -> int:
    """Round half-up to an integer."""
    return int(to_decimal(value).quantize(WHOLE, rounding=ROUND_HALF_UP))
