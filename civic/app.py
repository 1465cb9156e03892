"""Wires storage and services from AppConfig.

One CivicApp per process; boot() is the once-per-run start sequence.
"""

import logging
from typing import Callable

from civic.config import AppConfig
from civic.models.notification import Notification
from civic.services.issue_repository import IssueRepository
from civic.services.notifications import NotificationQueue
from civic.services.reputation import ReputationTracker
from civic.services.session import Authenticator, SessionManager, StaticCredentialsAuthenticator
from civic.services.theme import ThemePreference
from civic.storage.adapter import StoreAdapter
from civic.storage.backends import KeyValueStorage, make_storage
from civic.utils.ids import now_ms
from civic.utils.maps import map_embed_url

LOG = logging.getLogger("civic.app")


class CivicApp:
    """Repository, queue, reputation, session and theme over one storage."""

    def __init__(
        self,
        config: AppConfig,
        storage: KeyValueStorage | None = None,
        authenticator: Authenticator | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.config = config
        self.storage = storage or make_storage(config.storage.backend, config.storage.path)
        self.adapter = StoreAdapter(self.storage)
        self.notifications = NotificationQueue(self.adapter, clock=clock)
        self.reputation = ReputationTracker(self.adapter)
        self.issues = IssueRepository(self.adapter, self.notifications, self.reputation, clock=clock)
        self.session = SessionManager(
            self.adapter,
            authenticator
            or StaticCredentialsAuthenticator(config.admin.username, config.admin_password_resolved),
        )
        self.theme = ThemePreference(self.adapter, default=config.ui.default_theme)

    def boot(self) -> Notification | None:
        """Seed demo data if empty, then consume exactly one notification."""
        if self.config.seed.enabled:
            self.issues.seed_if_empty()
        note = self.notifications.consume_one()
        if note:
            LOG.info("Notification: %s", note.text)
        return note

    def map_url(self, location: str | None) -> str:
        return map_embed_url(location, self.config.ui.map_base_url)
