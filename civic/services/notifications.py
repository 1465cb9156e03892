"""FIFO of pending status-change messages in the civic_notifications slot.

Boot consumes one entry per run; each consume_one call removes exactly one.
"""

import logging
from typing import Callable

from pydantic import ValidationError

from civic.models.notification import Notification
from civic.storage.adapter import STORAGE_KEYS, StoreAdapter
from civic.utils.ids import new_id, now_ms

LOG = logging.getLogger("civic.services.notifications")


class NotificationQueue:
    """Append at the tail, consume from the head."""

    def __init__(self, adapter: StoreAdapter, clock: Callable[[], int] = now_ms) -> None:
        self.adapter = adapter
        self.clock = clock

    def _load_raw(self) -> list:
        data = self.adapter.get(STORAGE_KEYS["notifications"], [])
        return data if isinstance(data, list) else []

    def pending(self) -> list[Notification]:
        """Queued notifications, head first. Malformed entries are skipped."""
        out = []
        for item in self._load_raw():
            try:
                out.append(Notification.model_validate(item))
            except ValidationError as e:
                LOG.warning("Skip invalid notification %r: %s", item, e)
        return out

    def emit(self, text: str) -> Notification:
        """Append notification and persist."""
        note = Notification(id=new_id(), text=text, at=self.clock())
        queue = self._load_raw()
        queue.append(note.model_dump(mode="json"))
        self.adapter.set(STORAGE_KEYS["notifications"], queue)
        LOG.info("Queued notification: %s", text)
        return note

    def consume_one(self) -> Notification | None:
        """Remove and return the head, or None when the queue is empty."""
        queue = self._load_raw()
        while queue:
            head = queue.pop(0)
            self.adapter.set(STORAGE_KEYS["notifications"], queue)
            try:
                return Notification.model_validate(head)
            except ValidationError as e:
                LOG.warning("Dropped invalid notification %r: %s", head, e)
        return None
