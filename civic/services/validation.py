"""Report submission validation.

All failing checks are collected in order so the form can show every problem
at once.
"""

import re

from civic.models.issue import ISSUE_CATEGORIES, IssueDraft

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MIN_DESCRIPTION_LENGTH = 10
MESSAGE_SEPARATOR = " • "


class SubmissionError(ValueError):
    """Raised when a draft fails validation. messages holds every reason."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__(MESSAGE_SEPARATOR.join(self.messages))


def is_valid_email(email: str) -> bool:
    """Basic local@domain.tld shape check."""
    return bool(email) and EMAIL_RE.fullmatch(email) is not None


def validate_draft(draft: IssueDraft) -> list[str]:
    """Return ordered failure reasons (empty list when the draft is valid)."""
    errors: list[str] = []
    if not draft.name:
        errors.append("Name is required")
    if not is_valid_email(draft.email):
        errors.append("Valid email is required")
    if not draft.location:
        errors.append("Location is required")
    if not draft.category:
        errors.append("Issue type is required")
    elif draft.category not in ISSUE_CATEGORIES:
        errors.append(f"Issue type must be one of: {', '.join(ISSUE_CATEGORIES)}")
    if len(draft.description) < MIN_DESCRIPTION_LENGTH:
        errors.append(f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters")
    return errors


def ensure_valid(draft: IssueDraft) -> None:
    """Raise SubmissionError if validate_draft finds anything."""
    errors = validate_draft(draft)
    if errors:
        raise SubmissionError(errors)
