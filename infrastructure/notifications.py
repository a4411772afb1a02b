"""
Notifier implementation backed by an in-process queue.

Each notification is logged and kept until the HTTP layer drains it into the
next view response, where the client shows it as a toast.
"""
import logging
from dataclasses import dataclass
from typing import List

from domain.models import NotificationKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    message: str


class QueueNotifier:
    """Notifier that queues messages until drained."""

    def __init__(self) -> None:
        self._pending: List[Notification] = []

    def notify(self, kind: NotificationKind, message: str) -> None:
        if kind == NotificationKind.ERROR:
            logger.warning(f"Notification ({kind.value}): {message}")
        else:
            logger.info(f"Notification ({kind.value}): {message}")
        self._pending.append(Notification(kind=kind, message=message))

    @property
    def pending(self) -> List[Notification]:
        return list(self._pending)

    def drain(self) -> List[Notification]:
        """Return and clear all pending notifications, oldest first."""
        drained, self._pending = self._pending, []
        return drained
