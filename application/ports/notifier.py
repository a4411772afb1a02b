"""
Notifier Interface (Port).

Fire-and-forget sink for user-visible notifications (toasts).
"""
from typing import Protocol

from domain.models import NotificationKind


class Notifier(Protocol):
    """Shows a short message to the user."""

    def notify(self, kind: NotificationKind, message: str) -> None:
        """
        Emit a notification.

        Args:
            kind: success or error
            message: Text shown to the user
        """
        ...
