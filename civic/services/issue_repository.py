"""Issue storage in the civic_issues slot as one JSON list, newest first.

Every mutation is read-modify-write of the whole list. Lookup misses on
upvote/set_status are silent: the id came from a list that was rendered
before the miss, so a miss means a stale view, not a fault.

Records that fail the schema are hidden from reads but written back as-is
on every save, so a mutation never drops them.

Two processes writing the same storage race (last write wins); there is no
versioning or merge.
"""

import logging
from typing import Any, Callable, List

from pydantic import ValidationError

from civic.models.issue import (
    ALL,
    STATUS_ORDER,
    Issue,
    IssueDraft,
    IssueFilters,
    status_rank,
)
from civic.services.notifications import NotificationQueue
from civic.services.reputation import ReputationTracker
from civic.services.validation import ensure_valid
from civic.storage.adapter import STORAGE_KEYS, StoreAdapter
from civic.utils.ids import new_id, now_ms

LOG = logging.getLogger("civic.services.issue_repository")

DAY_MS = 1000 * 60 * 60 * 24

# Events passed to listeners after a successful mutation
EVENT_SEEDED = "seeded"
EVENT_CREATED = "created"
EVENT_UPVOTED = "upvoted"
EVENT_STATUS_CHANGED = "status_changed"

Listener = Callable[[str, Issue | None], None]


class InvalidStatusError(ValueError):
    """Raised when set_status gets something other than Pending, In Progress or Resolved."""


def _demo_issues(now: int) -> List[Issue]:
    return [
        Issue(
            id=new_id(),
            title="Pothole on Main St",
            name="Alex Doe",
            email="alex@example.com",
            location="Main St & 5th Ave",
            category="Road",
            description="Large pothole causing traffic issues.",
            status="Pending",
            upvotes=12,
            created_at=now - DAY_MS * 3,
        ),
        Issue(
            id=new_id(),
            title="Streetlight not working",
            name="Priya N",
            email="priya@example.com",
            location="Elm Street Park",
            category="Lighting",
            description="Streetlight out near playground.",
            status="In Progress",
            upvotes=7,
            created_at=now - DAY_MS * 2,
        ),
        Issue(
            id=new_id(),
            title="Overflowing trash bin",
            name="Sam K",
            email="sam@example.com",
            location="Riverside Walk",
            category="Sanitation",
            description="Needs urgent cleanup.",
            status="Resolved",
            upvotes=3,
            created_at=now - DAY_MS,
        ),
    ]


class IssueRepository:
    """CRUD and query over the stored issue list.

    Consumers pull with list/query and call subscribe() to be told when to
    re-render after create/upvote/set_status.
    """

    def __init__(
        self,
        adapter: StoreAdapter,
        notifications: NotificationQueue,
        reputation: ReputationTracker,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.adapter = adapter
        self.notifications = notifications
        self.reputation = reputation
        self.clock = clock
        self._listeners: List[Listener] = []

    # -- listeners ---------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register listener(event, issue). Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: str, issue: Issue | None) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, issue)
            except Exception as e:
                LOG.exception("Listener failed on %s: %s", event, e)

    # -- persistence -------------------------------------------------------

    def _read(self) -> tuple[List[Issue], List[Any]]:
        """Parsed issues plus raw entries that failed the schema."""
        data = self.adapter.get(STORAGE_KEYS["issues"], [])
        if not isinstance(data, list):
            LOG.warning("Stored issues are not a list, treating as empty")
            return [], []
        issues, unparsed = [], []
        for item in data:
            try:
                issues.append(Issue.model_validate(item))
            except ValidationError as e:
                LOG.warning("Skip invalid issue record: %s", e)
                unparsed.append(item)
        return issues, unparsed

    def _load(self) -> List[Issue]:
        return self._read()[0]

    def _save(self, issues: List[Issue], unparsed: List[Any] | None = None) -> None:
        """Write issues; unparsed raw entries are kept after them untouched."""
        records = [i.model_dump(mode="json") for i in issues]
        records.extend(unparsed or [])
        self.adapter.set(STORAGE_KEYS["issues"], records)
        LOG.debug("Saved %s issues (%s unparsed kept)", len(issues), len(unparsed or []))

    # -- reads -------------------------------------------------------------

    def list(self) -> List[Issue]:
        """Full collection as stored (newest submissions first)."""
        return self._load()

    def get(self, issue_id: str) -> Issue | None:
        for issue in self._load():
            if issue.id == issue_id:
                return issue
        return None

    def query(self, filters: IssueFilters | None = None) -> List[Issue]:
        """Filter and sort: status rank asc, upvotes desc, created_at desc."""
        filters = filters or IssueFilters()
        items = self._load()
        text = filters.text.lower()
        if text:
            items = [i for i in items if text in i.search_text()]
        if filters.category and filters.category != ALL:
            items = [i for i in items if i.category == filters.category]
        if filters.status and filters.status != ALL:
            items = [i for i in items if i.status == filters.status]
        return sorted(items, key=lambda i: (status_rank(i.status), -i.upvotes, -i.created_at))

    def count_by_category(self) -> dict[str, int]:
        """Issue count per category, in first-seen order (admin chart)."""
        counts: dict[str, int] = {}
        for issue in self._load():
            counts[issue.category] = counts.get(issue.category, 0) + 1
        return counts

    def count_by_status(self) -> dict[str, int]:
        counts = {status: 0 for status in STATUS_ORDER}
        for issue in self._load():
            counts[issue.status] += 1
        return counts

    # -- mutations ---------------------------------------------------------

    def seed_if_empty(self) -> bool:
        """Store the three demo issues when the collection is empty.

        Returns True if seeding happened.
        """
        issues, unparsed = self._read()
        if issues:
            return False
        self._save(_demo_issues(self.clock()), unparsed)
        LOG.info("Seeded demo issues")
        self._notify(EVENT_SEEDED, None)
        return True

    def create(self, draft: IssueDraft) -> Issue:
        """Validate draft and insert a Pending issue at the front.

        Raises SubmissionError with every failing check.
        """
        ensure_valid(draft)
        issues, unparsed = self._read()
        taken = {i.id for i in issues}
        taken.update(item.get("id") for item in unparsed if isinstance(item, dict))
        issue_id = new_id()
        while issue_id in taken:
            issue_id = new_id()
        issue = Issue(
            id=issue_id,
            title=draft.resolved_title(),
            name=draft.name,
            email=draft.email,
            location=draft.location,
            category=draft.category,
            description=draft.description,
            image_data_url=draft.image_data_url,
            status="Pending",
            upvotes=0,
            created_at=self.clock(),
        )
        issues.insert(0, issue)
        self._save(issues, unparsed)
        self.reputation.record_activity(draft.email)
        LOG.info("Created issue %s (%s)", issue.id, issue.title)
        self._notify(EVENT_CREATED, issue)
        return issue

    def upvote(self, issue_id: str) -> Issue | None:
        """Add one upvote. Returns the updated issue, None if id is unknown."""
        issues, unparsed = self._read()
        for issue in issues:
            if issue.id == issue_id:
                issue.upvotes += 1
                self._save(issues, unparsed)
                LOG.info("Issue %s upvotes -> %s", issue_id, issue.upvotes)
                self._notify(EVENT_UPVOTED, issue)
                return issue
        LOG.debug("Cannot upvote: issue %s not found", issue_id)
        return None

    def set_status(self, issue_id: str, status: str) -> Issue | None:
        """Update status and queue a notification about it.

        Returns the updated issue, None if id is unknown. Raises
        InvalidStatusError for a status outside STATUS_ORDER.
        """
        if status not in STATUS_ORDER:
            raise InvalidStatusError(f"Unknown status {status!r}; expected one of: {', '.join(STATUS_ORDER)}")
        issues, unparsed = self._read()
        for issue in issues:
            if issue.id == issue_id:
                issue.status = status
                self._save(issues, unparsed)
                self.notifications.emit(f'Status for "{issue.title}" changed to {status}')
                LOG.info("Issue %s status -> %s", issue_id, status)
                self._notify(EVENT_STATUS_CHANGED, issue)
                return issue
        LOG.debug("Cannot set status: issue %s not found", issue_id)
        return None
