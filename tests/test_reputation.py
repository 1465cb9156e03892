"""Tests for reporter counters and badge tiers."""

import pytest

from civic.models import BadgeTier, tier_for_count
from civic.services import ReputationTracker
from civic.storage import STORAGE_KEYS, MemoryStorage, StoreAdapter


@pytest.fixture
def tracker() -> ReputationTracker:
    return ReputationTracker(StoreAdapter(MemoryStorage()))


@pytest.mark.parametrize(
    ("count", "tier"),
    [
        (0, BadgeTier.NONE),
        (1, BadgeTier.BRONZE),
        (2, BadgeTier.BRONZE),
        (3, BadgeTier.SILVER),
        (5, BadgeTier.GOLD),
        (9, BadgeTier.GOLD),
        (10, BadgeTier.PLATINUM),
        (250, BadgeTier.PLATINUM),
    ],
)
def test_tier_thresholds(count: int, tier: BadgeTier) -> None:
    """1/3/5/10 map to Bronze/Silver/Gold/Platinum."""
    assert tier_for_count(count) is tier


def test_labels() -> None:
    """Label is '<Tier> Reporter', empty for none."""
    assert BadgeTier.NONE.label == ""
    assert BadgeTier.GOLD.label == "Gold Reporter"


def test_record_activity_counts_up(tracker: ReputationTracker) -> None:
    """Counter starts at 1 and increments per call."""
    tracker.record_activity("a@example.com")
    assert tracker.count_for("a@example.com") == 1
    assert tracker.badge_for("a@example.com") is BadgeTier.BRONZE
    tracker.record_activity("a@example.com")
    tracker.record_activity("a@example.com")
    assert tracker.count_for("a@example.com") == 3
    assert tracker.badge_for("a@example.com") is BadgeTier.SILVER
    assert tracker.count_for("b@example.com") == 0
    assert tracker.badge_for("b@example.com") is BadgeTier.NONE


def test_empty_email_ignored(tracker: ReputationTracker) -> None:
    """Empty email writes nothing."""
    tracker.record_activity("")
    assert tracker.adapter.get(STORAGE_KEYS["reporters"], None) is None


def test_counters_persist_in_slot(tracker: ReputationTracker) -> None:
    """Counters are a plain email -> count mapping."""
    tracker.record_activity("a@example.com")
    assert tracker.adapter.get(STORAGE_KEYS["reporters"], {}) == {"a@example.com": 1}


def test_corrupt_slot_resets(tracker: ReputationTracker) -> None:
    """Non-mapping slot reads as no counters."""
    tracker.adapter.set(STORAGE_KEYS["reporters"], ["nope"])
    assert tracker.count_for("a@example.com") == 0
    tracker.record_activity("a@example.com")
    assert tracker.count_for("a@example.com") == 1


def test_non_numeric_counter_restarts(tracker: ReputationTracker) -> None:
    """A counter value that is not a number counts as 0 and is overwritten."""
    tracker.adapter.set(STORAGE_KEYS["reporters"], {"a@example.com": "abc", "b@example.com": 4})
    assert tracker.count_for("a@example.com") == 0
    tracker.record_activity("a@example.com")
    assert tracker.adapter.get(STORAGE_KEYS["reporters"], {}) == {"a@example.com": 1, "b@example.com": 4}
