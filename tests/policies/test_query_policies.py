from __future__ import annotations

import pytest

from src.laundry_system.laundry_system.core.enums import Role, TransactionStatus
from src.laundry_system.laundry_system.core.exceptions import AuthorizationError
from src.laundry_system.laundry_system.database.query import EQ, IN, IS_NULL, Criterion
from src.laundry_system.laundry_system.policies.query_policies import (
    NEWEST_TRANSACTIONS_FIRST,
    OLDEST_TRANSACTIONS_FIRST,
    ROLE_POLICIES,
    Operation,
    parse_status_filter,
    policy_for,
)


def test_every_role_has_a_policy():
    assert set(ROLE_POLICIES) == set(Role)


def test_customer_sees_own_transactions_newest_first():
    query = policy_for(Role.CUSTOMER, Operation.LIST_TRANSACTIONS, actor_id=5)

    assert query.criteria == (Criterion("customer_id", EQ, 5),)
    assert query.order_by == NEWEST_TRANSACTIONS_FIRST


def test_receptionist_queue_is_pending_and_unassigned_oldest_first():
    query = policy_for(Role.RECEPTIONIST, Operation.LIST_TRANSACTIONS)

    assert query.criteria == (
        Criterion("status", EQ, "Pending"),
        Criterion("laundry_staff_id", IS_NULL),
    )
    assert query.order_by == OLDEST_TRANSACTIONS_FIRST


def test_staff_sees_own_pending_jobs():
    query = policy_for(Role.LAUNDRY_STAFF, Operation.LIST_TRANSACTIONS, actor_id=3)

    assert Criterion("laundry_staff_id", EQ, 3) in query.criteria
    assert Criterion("status", EQ, "Pending") in query.criteria
    assert query.matches({"laundry_staff_id": 3, "status": TransactionStatus.PENDING})
    assert not query.matches({"laundry_staff_id": 3, "status": TransactionStatus.FINISHED})
    assert not query.matches({"laundry_staff_id": 4, "status": TransactionStatus.PENDING})


def test_admin_status_filter():
    assert policy_for(Role.ADMIN, Operation.LIST_TRANSACTIONS).criteria == ()
    finished = policy_for(Role.ADMIN, Operation.LIST_TRANSACTIONS, status_filter="fInIsHeD")
    assert finished.criteria == (Criterion("status", EQ, "Finished"),)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Pending", TransactionStatus.PENDING),
        (" finished ", TransactionStatus.FINISHED),
        ("All", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_status_filter(text, expected):
    assert parse_status_filter(text) == expected


def test_user_listings():
    employees = policy_for(Role.ADMIN, Operation.LIST_USERS)
    (criterion,) = employees.criteria
    assert criterion.op == IN
    assert set(criterion.value) == {"Admin", "Laundry Staff", "Receptionist"}

    staff = policy_for(Role.RECEPTIONIST, Operation.LIST_USERS)
    assert staff.criteria == (Criterion("role", EQ, "Laundry Staff"),)


@pytest.mark.parametrize("role", [Role.CUSTOMER, Role.LAUNDRY_STAFF])
def test_unsupported_operation_is_not_authorized(role):
    with pytest.raises(AuthorizationError):
        policy_for(role, Operation.LIST_USERS, actor_id=1)


@pytest.mark.parametrize("role", [Role.CUSTOMER, Role.LAUNDRY_STAFF])
def test_scoped_listing_without_actor(role):
    with pytest.raises(AuthorizationError):
        policy_for(role, Operation.LIST_TRANSACTIONS)
