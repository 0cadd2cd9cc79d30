from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ..core.enums import EntityKind
from .query import Query

PRIMARY_KEYS = {
    EntityKind.USER: "user_id",
    EntityKind.SERVICE: "service_id",
    EntityKind.TRANSACTION: "transaction_id",
    EntityKind.NOTIFICATION: "notification_id",
}

# Entities whose created_at is assigned by the store, never by the caller.
TIMESTAMPED_KINDS = frozenset({EntityKind.TRANSACTION, EntityKind.NOTIFICATION})


class PersistenceGateway(Protocol):
    """Entity-shaped storage used by every repository.

    Rows are plain dicts keyed by field name (``transaction_id``, ``status``...).
    ``update`` accepts an optional ``expected`` mapping; the write only happens
    when the stored row still has those values (a value of ``None`` means the
    field must be NULL).
    """

    def find_all(self, kind: EntityKind, query: Optional[Query] = None) -> list[dict]:
        raise NotImplementedError

    def find_one(self, kind: EntityKind, entity_id: int) -> Optional[dict]:
        raise NotImplementedError

    def insert(self, kind: EntityKind, fields: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def update(
        self,
        kind: EntityKind,
        entity_id: int,
        fields: Mapping[str, Any],
        *,
        expected: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        raise NotImplementedError

    def delete(self, kind: EntityKind, entity_id: int) -> bool:
        raise NotImplementedError
