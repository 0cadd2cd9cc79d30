from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EntityKind
from ..database.gateway import PersistenceGateway
from ..database.query import Query, eq
from .model import Notification
from .repository import NotificationRepository


def _to_notification(row: dict) -> Notification:
    return Notification(
        notification_id=int(row["notification_id"]),
        recipient_id=int(row["recipient_id"]),
        transaction_id=int(row["transaction_id"]),
        message=row["message"],
        created_at=row["created_at"],
        is_read=bool(row.get("is_read", False)),
    )


class GatewayNotificationRepository(NotificationRepository):
    def __init__(self, gateway: PersistenceGateway):
        self._gateway = gateway

    def get_by_id(self, notification_id: int) -> Optional[Notification]:
        row = self._gateway.find_one(EntityKind.NOTIFICATION, int(notification_id))
        return _to_notification(row) if row else None

    def create_notification(self, *, recipient_id: int, transaction_id: int, message: str) -> int:
        return self._gateway.insert(
            EntityKind.NOTIFICATION,
            {
                "recipient_id": int(recipient_id),
                "transaction_id": int(transaction_id),
                "message": message,
                "is_read": False,
            },
        )

    def list_for_recipient(self, recipient_id: int) -> Sequence[Notification]:
        query = (
            Query()
            .where(eq("recipient_id", int(recipient_id)))
            .ordered(("created_at", True), ("notification_id", True))
        )
        return [_to_notification(r) for r in self._gateway.find_all(EntityKind.NOTIFICATION, query)]

    def mark_read(self, notification_id: int) -> bool:
        return self._gateway.update(EntityKind.NOTIFICATION, int(notification_id), {"is_read": True})

    def delete_by_id(self, notification_id: int) -> bool:
        return self._gateway.delete(EntityKind.NOTIFICATION, int(notification_id))
