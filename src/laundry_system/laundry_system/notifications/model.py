from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Notification:
    notification_id: int
    recipient_id: int
    transaction_id: int
    message: str
    created_at: datetime
    is_read: bool = False
