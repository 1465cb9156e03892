"""Reporter badge tiers derived from submission counts."""

from enum import Enum


class BadgeTier(Enum):
    """Reputation tier. Value is the tier name, empty for none."""

    NONE = ""
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"

    @property
    def label(self) -> str:
        """Display label, e.g. 'Gold Reporter' (empty for NONE)."""
        return f"{self.value} Reporter" if self.value else ""


# Highest threshold first
BADGE_THRESHOLDS: tuple[tuple[int, BadgeTier], ...] = (
    (10, BadgeTier.PLATINUM),
    (5, BadgeTier.GOLD),
    (3, BadgeTier.SILVER),
    (1, BadgeTier.BRONZE),
)


def tier_for_count(count: int) -> BadgeTier:
    """Highest tier whose threshold count meets."""
    for threshold, tier in BADGE_THRESHOLDS:
        if count >= threshold:
            return tier
    return BadgeTier.NONE
