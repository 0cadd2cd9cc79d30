from __future__ import annotations

import copy
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import now_local
from ..core.enums import EntityKind
from .gateway import PRIMARY_KEYS, TIMESTAMPED_KINDS, PersistenceGateway
from .query import Query, plain_value


class InMemoryGateway(PersistenceGateway):
    """Dict-backed gateway for tests and the ``memory`` store backend.

    Mirrors the MySQL schema defaults: auto-increment ids per kind, store-assigned
    ``created_at`` and ``is_read`` defaulting to False.
    """

    def __init__(self, *, clock: Callable[[], datetime] = now_local):
        self._clock = clock
        self._rows: dict[EntityKind, dict[int, dict]] = {kind: {} for kind in EntityKind}
        self._next_id: dict[EntityKind, int] = {kind: 1 for kind in EntityKind}

    def find_all(self, kind: EntityKind, query: Optional[Query] = None) -> list[dict]:
        rows = self._rows[kind].values()
        return [copy.deepcopy(r) for r in (query or Query()).apply(rows)]

    def find_one(self, kind: EntityKind, entity_id: int) -> Optional[dict]:
        row = self._rows[kind].get(int(entity_id))
        return copy.deepcopy(row) if row else None

    def insert(self, kind: EntityKind, fields: Mapping[str, Any]) -> int:
        entity_id = self._next_id[kind]
        self._next_id[kind] += 1

        row = {name: plain_value(value) for name, value in fields.items()}
        row[PRIMARY_KEYS[kind]] = entity_id
        if kind in TIMESTAMPED_KINDS:
            row["created_at"] = self._clock()
        if kind == EntityKind.NOTIFICATION:
            row.setdefault("is_read", False)

        self._rows[kind][entity_id] = row
        return entity_id

    def update(
        self,
        kind: EntityKind,
        entity_id: int,
        fields: Mapping[str, Any],
        *,
        expected: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        row = self._rows[kind].get(int(entity_id))
        if row is None:
            return False
        for name, value in (expected or {}).items():
            if row.get(name) != plain_value(value):
                return False
        row.update({name: plain_value(value) for name, value in fields.items()})
        return True

    def delete(self, kind: EntityKind, entity_id: int) -> bool:
        return self._rows[kind].pop(int(entity_id), None) is not None
