"""
Single-slot notification channel. The newest message wins; the presentation
layer clears it once the toast has been shown.
"""

from __future__ import annotations

from src.domains.wallet.models import Notification


class NotificationChannel:
    def __init__(self) -> None:
        self._pending: Notification | None = None

    @property
    def pending(self) -> Notification | None:
        return self._pending

    def emit(self, message: str) -> Notification:
        """Replace any unconsumed notification with `message`."""
        self._pending = Notification(message=message, visible=True)
        return self._pending

    def consume(self) -> Notification | None:
        """Return the pending notification and clear the slot."""
        out, self._pending = self._pending, None
        return out

    def clear(self) -> None:
        self._pending = None
