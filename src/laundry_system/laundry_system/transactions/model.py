from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import TransactionStatus


@dataclass(frozen=True)
class Transaction:
    """Domain entity: a laundry order.

    receptionist_id and laundry_staff_id are either both None or both set;
    weight never changes after creation.
    """

    transaction_id: int
    service_id: int
    customer_id: int
    receptionist_id: Optional[int]
    laundry_staff_id: Optional[int]
    created_at: datetime
    status: TransactionStatus
    weight: float
    notes: str
