from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..database.query import Query
from .model import Transaction


class TransactionRepository(Protocol):
    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        raise NotImplementedError

    def create_transaction(self, *, service_id: int, customer_id: int, weight: float, notes: str) -> int:
        raise NotImplementedError

    def find(self, query: Query) -> Sequence[Transaction]:
        raise NotImplementedError

    def assign(self, *, transaction_id: int, staff_id: int, receptionist_id: int) -> bool:
        """Write the assignment only if the transaction is still pending and unassigned."""

        raise NotImplementedError

    def mark_finished(self, *, transaction_id: int) -> bool:
        """Write Finished only if the transaction is still pending."""

        raise NotImplementedError
