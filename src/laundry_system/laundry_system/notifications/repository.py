from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Notification


class NotificationRepository(Protocol):
    def get_by_id(self, notification_id: int) -> Optional[Notification]:
        raise NotImplementedError

    def create_notification(self, *, recipient_id: int, transaction_id: int, message: str) -> int:
        raise NotImplementedError

    def list_for_recipient(self, recipient_id: int) -> Sequence[Notification]:
        """Newest first."""

        raise NotImplementedError

    def mark_read(self, notification_id: int) -> bool:
        raise NotImplementedError

    def delete_by_id(self, notification_id: int) -> bool:
        raise NotImplementedError
