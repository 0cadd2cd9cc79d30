from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import EntityKind
from .connection import DatabaseConnection
from .gateway import PersistenceGateway
from .mysql_base import db_cursor, fetchall, fetchone
from .query import EQ, IN, IS_NULL, Criterion, Query, plain_value


@dataclass(frozen=True)
class TableSpec:
    table: str
    # field name -> column name; the first entry is the primary key
    columns: dict[str, str]

    @property
    def primary_key(self) -> str:
        return next(iter(self.columns))

    def column(self, field_name: str) -> str:
        try:
            return self.columns[field_name]
        except KeyError:
            raise ValueError(f"Unknown field {field_name!r} for table {self.table}") from None

    def select_list(self) -> str:
        return ", ".join(f"`{col}` AS `{name}`" for name, col in self.columns.items())


TABLES: dict[EntityKind, TableSpec] = {
    EntityKind.USER: TableSpec(
        table="Users",
        columns={
            "user_id": "UserID",
            "username": "UserName",
            "email": "UserEmail",
            "password_hash": "UserPassword",
            "gender": "UserGender",
            "date_of_birth": "UserDOB",
            "role": "UserRole",
        },
    ),
    EntityKind.SERVICE: TableSpec(
        table="Services",
        columns={
            "service_id": "ServiceID",
            "name": "ServiceName",
            "description": "ServiceDescription",
            "price": "ServicePrice",
            "duration_days": "ServiceDuration",
        },
    ),
    EntityKind.TRANSACTION: TableSpec(
        table="Transactions",
        columns={
            "transaction_id": "TransactionID",
            "service_id": "ServiceID",
            "customer_id": "CustomerID",
            "receptionist_id": "ReceptionistID",
            "laundry_staff_id": "LaundryStaffID",
            "created_at": "TransactionDate",
            "status": "TransactionStatus",
            "weight": "TotalWeight",
            "notes": "TransactionNotes",
        },
    ),
    EntityKind.NOTIFICATION: TableSpec(
        table="Notifications",
        columns={
            "notification_id": "NotificationID",
            "recipient_id": "RecipientID",
            "transaction_id": "TransactionID",
            "message": "NotificationMessage",
            "created_at": "CreatedAt",
            "is_read": "IsRead",
        },
    ),
}


def _condition(spec: TableSpec, criterion: Criterion, params: list[object]) -> str:
    col = f"`{spec.column(criterion.field)}`"
    if criterion.op == EQ:
        params.append(criterion.value)
        return f"{col}=%s"
    if criterion.op == IS_NULL:
        return f"{col} IS NULL"
    if criterion.op == IN:
        if not criterion.value:
            return "1=0"
        params.extend(criterion.value)
        return f"{col} IN ({', '.join(['%s'] * len(criterion.value))})"
    raise ValueError(f"Unsupported criterion op: {criterion.op!r}")


def build_select(spec: TableSpec, query: Query) -> tuple[str, tuple]:
    clauses = ["1=1"]
    params: list[object] = []
    for criterion in query.criteria:
        clauses.append(_condition(spec, criterion, params))

    sql = f"SELECT {spec.select_list()} FROM `{spec.table}` WHERE {' AND '.join(clauses)}"
    if query.order_by:
        order = ", ".join(
            f"`{spec.column(name)}` {'DESC' if desc else 'ASC'}" for name, desc in query.order_by
        )
        sql += f" ORDER BY {order}"
    return sql, tuple(params)


class MySQLGateway(PersistenceGateway):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_all(self, kind: EntityKind, query: Optional[Query] = None) -> list[dict]:
        sql, params = build_select(TABLES[kind], query or Query())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return fetchall(cur)

    def find_one(self, kind: EntityKind, entity_id: int) -> Optional[dict]:
        spec = TABLES[kind]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {spec.select_list()} FROM `{spec.table}` WHERE `{spec.column(spec.primary_key)}`=%s",
                (int(entity_id),),
            )
            return fetchone(cur)

    def insert(self, kind: EntityKind, fields: Mapping[str, Any]) -> int:
        spec = TABLES[kind]
        names = list(fields)
        cols = ", ".join(f"`{spec.column(n)}`" for n in names)
        placeholders = ", ".join(["%s"] * len(names))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO `{spec.table}` ({cols}) VALUES ({placeholders})",
                tuple(plain_value(fields[n]) for n in names),
            )
            return int(cur.lastrowid)

    def update(
        self,
        kind: EntityKind,
        entity_id: int,
        fields: Mapping[str, Any],
        *,
        expected: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        spec = TABLES[kind]
        assignments = ", ".join(f"`{spec.column(n)}`=%s" for n in fields)
        params: list[object] = [plain_value(v) for v in fields.values()]

        clauses = [f"`{spec.column(spec.primary_key)}`=%s"]
        params.append(int(entity_id))
        for name, value in (expected or {}).items():
            if value is None:
                clauses.append(f"`{spec.column(name)}` IS NULL")
            else:
                clauses.append(f"`{spec.column(name)}`=%s")
                params.append(plain_value(value))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE `{spec.table}` SET {assignments} WHERE {' AND '.join(clauses)}",
                tuple(params),
            )
            return cur.rowcount > 0

    def delete(self, kind: EntityKind, entity_id: int) -> bool:
        spec = TABLES[kind]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"DELETE FROM `{spec.table}` WHERE `{spec.column(spec.primary_key)}`=%s",
                (int(entity_id),),
            )
            return cur.rowcount > 0
