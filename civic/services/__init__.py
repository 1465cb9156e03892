"""Issue repository and the services around it (reputation, notifications, session, theme)."""

from civic.services.images import read_image_as_data_url
from civic.services.issue_repository import (
    EVENT_CREATED,
    EVENT_SEEDED,
    EVENT_STATUS_CHANGED,
    EVENT_UPVOTED,
    InvalidStatusError,
    IssueRepository,
)
from civic.services.notifications import NotificationQueue
from civic.services.reports import submit_report
from civic.services.reputation import ReputationTracker
from civic.services.session import (
    AuthenticationError,
    Authenticator,
    SessionManager,
    StaticCredentialsAuthenticator,
)
from civic.services.theme import THEMES, ThemePreference
from civic.services.validation import SubmissionError, validate_draft

__all__ = [
    "EVENT_CREATED",
    "EVENT_SEEDED",
    "EVENT_STATUS_CHANGED",
    "EVENT_UPVOTED",
    "THEMES",
    "AuthenticationError",
    "Authenticator",
    "InvalidStatusError",
    "IssueRepository",
    "NotificationQueue",
    "ReputationTracker",
    "SessionManager",
    "StaticCredentialsAuthenticator",
    "SubmissionError",
    "ThemePreference",
    "read_image_as_data_url",
    "submit_report",
    "validate_draft",
]
