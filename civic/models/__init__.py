"""Schemas for stored records (issues, notifications, session) and badge tiers."""

from civic.models.issue import (
    ALL,
    ISSUE_CATEGORIES,
    STATUS_ORDER,
    Issue,
    IssueDraft,
    IssueFilters,
    IssueStatus,
    status_progress,
    status_rank,
)
from civic.models.notification import Notification
from civic.models.reporter import BADGE_THRESHOLDS, BadgeTier, tier_for_count
from civic.models.session import Session

__all__ = [
    "ALL",
    "BADGE_THRESHOLDS",
    "ISSUE_CATEGORIES",
    "STATUS_ORDER",
    "BadgeTier",
    "Issue",
    "IssueDraft",
    "IssueFilters",
    "IssueStatus",
    "Notification",
    "Session",
    "status_progress",
    "status_rank",
    "tier_for_count",
]
