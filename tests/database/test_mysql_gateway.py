from __future__ import annotations

import mysql.connector
import pytest

from src.laundry_system.laundry_system.core.enums import EntityKind, Role, TransactionStatus
from src.laundry_system.laundry_system.core.exceptions import StoreError
from src.laundry_system.laundry_system.database.mysql_gateway import TABLES, MySQLGateway, build_select
from src.laundry_system.laundry_system.policies.query_policies import Operation, policy_for


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.lastrowid = conn.lastrowid
        self.rowcount = conn.rowcount

    def execute(self, sql, params=()):
        if self._conn.fail_with is not None:
            raise self._conn.fail_with
        self._conn.executed.append((sql, tuple(params)))

    def fetchone(self):
        return self._conn.rows[0] if self._conn.rows else None

    def fetchall(self):
        return list(self._conn.rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, *, rows=(), lastrowid=0, rowcount=0, fail_with=None):
        self.rows = list(rows)
        self.lastrowid = lastrowid
        self.rowcount = rowcount
        self.fail_with = fail_with
        self.executed = []
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return FakeCursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn=None, *, refuse=False):
        self.conn = conn or FakeConnection()
        self.refuse = refuse

    def connect(self):
        if self.refuse:
            raise mysql.connector.Error("connection refused")
        return self.conn


def _where(sql: str) -> str:
    return sql.split(" WHERE ", 1)[1]


def test_select_maps_fields_to_columns():
    queue = policy_for(Role.RECEPTIONIST, Operation.LIST_TRANSACTIONS)
    sql, params = build_select(TABLES[EntityKind.TRANSACTION], queue)

    assert sql.startswith("SELECT `TransactionID` AS `transaction_id`, `ServiceID` AS `service_id`")
    assert " FROM `Transactions` " in sql
    assert _where(sql) == (
        "1=1 AND `TransactionStatus`=%s AND `LaundryStaffID` IS NULL "
        "ORDER BY `TransactionDate` ASC, `TransactionID` ASC"
    )
    assert params == ("Pending",)


def test_select_with_in_criterion():
    sql, params = build_select(TABLES[EntityKind.USER], policy_for(Role.ADMIN, Operation.LIST_USERS))

    assert _where(sql) == "1=1 AND `UserRole` IN (%s, %s, %s) ORDER BY `UserID` ASC"
    assert params == ("Admin", "Laundry Staff", "Receptionist")


def test_insert_returns_generated_id_and_commits():
    conn = FakeConnection(lastrowid=12)
    gw = MySQLGateway(FakeFactory(conn))

    new_id = gw.insert(EntityKind.NOTIFICATION, {"recipient_id": 5, "transaction_id": 7, "message": "done"})

    assert new_id == 12
    sql, params = conn.executed[0]
    assert sql == "INSERT INTO `Notifications` (`RecipientID`, `TransactionID`, `NotificationMessage`) VALUES (%s, %s, %s)"
    assert params == (5, 7, "done")
    assert conn.committed and conn.closed


def test_conditional_update_builds_guarded_where():
    conn = FakeConnection(rowcount=0)
    gw = MySQLGateway(FakeFactory(conn))

    updated = gw.update(
        EntityKind.TRANSACTION,
        7,
        {"laundry_staff_id": 3, "receptionist_id": 2},
        expected={"status": TransactionStatus.PENDING, "laundry_staff_id": None},
    )

    assert updated is False
    sql, params = conn.executed[0]
    assert sql == (
        "UPDATE `Transactions` SET `LaundryStaffID`=%s, `ReceptionistID`=%s "
        "WHERE `TransactionID`=%s AND `TransactionStatus`=%s AND `LaundryStaffID` IS NULL"
    )
    assert params == (3, 2, 7, "Pending")


def test_find_one_and_delete():
    conn = FakeConnection(rows=[{"service_id": 1, "name": "Wash"}], rowcount=1)
    gw = MySQLGateway(FakeFactory(conn))

    assert gw.find_one(EntityKind.SERVICE, 1) == {"service_id": 1, "name": "Wash"}
    assert gw.delete(EntityKind.SERVICE, 1) is True
    assert conn.executed[-1] == ("DELETE FROM `Services` WHERE `ServiceID`=%s", (1,))


def test_driver_errors_become_store_errors():
    conn = FakeConnection(fail_with=mysql.connector.Error("duplicate key"))
    gw = MySQLGateway(FakeFactory(conn))

    with pytest.raises(StoreError) as exc:
        gw.find_all(EntityKind.USER)

    assert exc.value.kind == "store"
    assert conn.rolled_back and conn.closed and not conn.committed


def test_unreachable_database():
    gw = MySQLGateway(FakeFactory(refuse=True))

    with pytest.raises(StoreError, match="Could not connect"):
        gw.find_one(EntityKind.USER, 1)
