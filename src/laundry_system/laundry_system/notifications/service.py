from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import COMPLETION_MESSAGE_TEMPLATE, DEFAULT_BRAND_NAME
from ..core.enums import TransactionStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..core.result import returns_result
from ..transactions.repository import TransactionRepository
from .model import Notification
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


def completion_message(transaction_id: int, brand: str = DEFAULT_BRAND_NAME) -> str:
    return COMPLETION_MESSAGE_TEMPLATE.format(transaction_id=int(transaction_id), brand=brand)


class NotificationService:
    """Use cases: admin sends pickup notices, customers read and dismiss them."""

    def __init__(
        self,
        notifications: NotificationRepository,
        transactions: TransactionRepository,
        *,
        brand: str = DEFAULT_BRAND_NAME,
    ):
        self._notifications = notifications
        self._transactions = transactions
        self._brand = brand

    def _owned(self, notification_id: int, recipient_id: int) -> Notification:
        notification = self._notifications.get_by_id(int(notification_id))
        # Someone else's notification looks the same as a missing one.
        if not notification or notification.recipient_id != int(recipient_id):
            raise NotFoundError("Notification not found.")
        return notification

    @returns_result
    def send_completion_notification(self, *, transaction_id: int, customer_id: int) -> int:
        """Create one pickup notice; calling twice creates two.

        customer_id is taken as given and not compared with the transaction's
        customer.
        """
        tx = self._transactions.get_by_id(int(transaction_id))
        if not tx:
            raise NotFoundError("Transaction not found.")
        if tx.status != TransactionStatus.FINISHED:
            raise ValidationError("You can only send pickup notifications for 'Finished' transactions.")

        notification_id = self._notifications.create_notification(
            recipient_id=int(customer_id),
            transaction_id=tx.transaction_id,
            message=completion_message(tx.transaction_id, self._brand),
        )
        logger.info(
            "Sent completion notification_id=%s for transaction_id=%s to customer_id=%s",
            notification_id,
            transaction_id,
            customer_id,
        )
        return notification_id

    @returns_result
    def list_notifications(self, recipient_id: int) -> Sequence[Notification]:
        return self._notifications.list_for_recipient(int(recipient_id))

    @returns_result
    def mark_notification_read(self, *, notification_id: int, recipient_id: int) -> None:
        notification = self._owned(notification_id, recipient_id)
        if not notification.is_read:
            self._notifications.mark_read(notification.notification_id)

    @returns_result
    def delete_notification(self, *, notification_id: int, recipient_id: int) -> None:
        notification = self._owned(notification_id, recipient_id)
        if not self._notifications.delete_by_id(notification.notification_id):
            raise NotFoundError("Notification not found.")
        logger.info("Deleted notification_id=%s", notification.notification_id)
