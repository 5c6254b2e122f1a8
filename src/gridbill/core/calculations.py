"""Core business logic for calculations."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

PEAK_HOUR_MULTIPLIER = Decimal("1.2")


@dataclass(frozen=True)
class Tier:
    """A consumption bracket; ``limit`` is the upper bound, ``None`` is open-ended."""

    limit: int | None
    rate: Decimal


def calculate_consumption(current_reading: int, previous_reading: int) -> int:
    """
    Calculates the units consumed between two meter readings.

    The result is negative when the current reading is below the previous
    one; callers decide whether such a reading is acceptable.
    """
    return current_reading - previous_reading


def calculate_tiered_charge(units: int, tiers: Sequence[Tier]) -> Decimal:
    """
    Calculates the charge for ``units`` using progressive tiers.

    Each tier prices only the units that fall inside its bracket, so 250
    units on tiers (100 @ r1, 300 @ r2, open @ r3) cost ``100*r1 + 150*r2``.

    Args:
        units: The consumed units, must not be negative.
        tiers: Tiers ordered by limit; the last one should be open-ended.

    Returns:
        The total charge.

    Raises:
        ValueError: If ``units`` is negative or not covered by the tiers.
    """
    if units < 0:
        raise ValueError(f"Cannot price a negative consumption of {units} units.")

    total = Decimal("0")
    lower = 0
    for tier in tiers:
        if units <= lower:
            break
        upper = units if tier.limit is None else min(units, tier.limit)
        total += (upper - lower) * tier.rate
        lower = upper
    if units > lower:
        raise ValueError(f"Tiers do not cover {units} units.")
    return total


def apply_peak_surcharge(charge: Decimal, is_peak_hour: bool) -> Decimal:
    """Multiplies the charge by the peak-hour factor when ``is_peak_hour`` is set."""
    return charge * PEAK_HOUR_MULTIPLIER if is_peak_hour else charge
