from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EntityKind, TransactionStatus
from ..database.gateway import PersistenceGateway
from ..database.query import Query
from . import lifecycle
from .model import Transaction
from .repository import TransactionRepository


def _optional_int(value) -> Optional[int]:
    return int(value) if value is not None else None


def _to_transaction(row: dict) -> Transaction:
    return Transaction(
        transaction_id=int(row["transaction_id"]),
        service_id=int(row["service_id"]),
        customer_id=int(row["customer_id"]),
        receptionist_id=_optional_int(row.get("receptionist_id")),
        laundry_staff_id=_optional_int(row.get("laundry_staff_id")),
        created_at=row["created_at"],
        status=TransactionStatus(row["status"]),
        weight=float(row["weight"]),
        notes=row.get("notes") or "",
    )


class GatewayTransactionRepository(TransactionRepository):
    def __init__(self, gateway: PersistenceGateway):
        self._gateway = gateway

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        row = self._gateway.find_one(EntityKind.TRANSACTION, int(transaction_id))
        return _to_transaction(row) if row else None

    def create_transaction(self, *, service_id: int, customer_id: int, weight: float, notes: str) -> int:
        fields = {
            "service_id": int(service_id),
            "customer_id": int(customer_id),
            "weight": float(weight),
            "notes": notes,
        }
        fields.update(lifecycle.initial_fields())
        return self._gateway.insert(EntityKind.TRANSACTION, fields)

    def find(self, query: Query) -> Sequence[Transaction]:
        return [_to_transaction(r) for r in self._gateway.find_all(EntityKind.TRANSACTION, query)]

    def assign(self, *, transaction_id: int, staff_id: int, receptionist_id: int) -> bool:
        return self._gateway.update(
            EntityKind.TRANSACTION,
            int(transaction_id),
            lifecycle.assignment_fields(staff_id, receptionist_id),
            expected=lifecycle.assign_guard(),
        )

    def mark_finished(self, *, transaction_id: int) -> bool:
        return self._gateway.update(
            EntityKind.TRANSACTION,
            int(transaction_id),
            lifecycle.finish_fields(),
            expected=lifecycle.finish_guard(),
        )
