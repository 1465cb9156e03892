"""Per-reporter submission counters in the civic_reporters slot."""

import logging

from civic.models.reporter import BadgeTier, tier_for_count
from civic.storage.adapter import STORAGE_KEYS, StoreAdapter

LOG = logging.getLogger("civic.services.reputation")


class ReputationTracker:
    """Counts submissions per email and maps them to badge tiers."""

    def __init__(self, adapter: StoreAdapter) -> None:
        self.adapter = adapter

    def _counters(self) -> dict[str, int]:
        data = self.adapter.get(STORAGE_KEYS["reporters"], {})
        if not isinstance(data, dict):
            LOG.warning("Reporter counters are not a mapping, resetting")
            return {}
        return data

    @staticmethod
    def _count(counters: dict, email: str) -> int:
        try:
            return int(counters.get(email) or 0)
        except (TypeError, ValueError):
            LOG.warning("Counter for %s is not a number, resetting", email)
            return 0

    def record_activity(self, email: str) -> None:
        """Bump submission count for email. Empty email is ignored."""
        if not email:
            return
        counters = self._counters()
        counters[email] = self._count(counters, email) + 1
        self.adapter.set(STORAGE_KEYS["reporters"], counters)
        LOG.debug("Reporter %s count -> %s", email, counters[email])

    def count_for(self, email: str) -> int:
        return self._count(self._counters(), email)

    def badge_for(self, email: str) -> BadgeTier:
        """Highest tier met by the stored count (NONE below 1)."""
        return tier_for_count(self.count_for(email))
