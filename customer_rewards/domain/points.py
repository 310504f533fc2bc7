"""Reward points engine - tiered points-per-dollar formula"""

from decimal import Decimal
from typing import Union

# Tier boundaries (in currency units) and the multiplier above the upper tier
LOWER_TIER_THRESHOLD = Decimal(50)
UPPER_TIER_THRESHOLD = Decimal(100)
UPPER_TIER_MULTIPLIER = 2

ZERO = Decimal(0)


def calculate_points(amount: Union[Decimal, int, float]) -> int:
    """
    Convert a transaction amount into reward points.

    Tiers:
    - 2 points per unit spent above $100
    - 1 point per unit spent between $50 and $100
    - nothing for the first $50

    Both tier contributions are summed before a single truncation to int,
    so fractional cents only drop once.

    Example:
        $120 -> 2 * 20 + 50 = 90 points
    """
    amount = amount if isinstance(amount, Decimal) else Decimal(str(amount))

    upper_tier = UPPER_TIER_MULTIPLIER * max(amount - UPPER_TIER_THRESHOLD, ZERO)
    lower_tier = max(min(amount, UPPER_TIER_THRESHOLD) - LOWER_TIER_THRESHOLD, ZERO)

    return int(upper_tier + lower_tier)
