"""Role-scoped read policies.

Each role has one policy function keyed on the read operation it performs. A
policy only builds a :class:`Query`; running it is the repository's job, so the
rules can be checked without any store.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from ..core.enums import EMPLOYEE_ROLES, Role, TransactionStatus
from ..core.exceptions import AuthorizationError
from ..database.query import Query, eq, is_null, one_of

NEWEST_TRANSACTIONS_FIRST = (("created_at", True), ("transaction_id", True))
OLDEST_TRANSACTIONS_FIRST = (("created_at", False), ("transaction_id", False))


class Operation(str, Enum):
    LIST_TRANSACTIONS = "list_transactions"
    LIST_USERS = "list_users"


Policy = Callable[..., Query]


def _not_allowed(role: Role, operation: Operation) -> AuthorizationError:
    return AuthorizationError(f"{role.value} cannot perform {operation.value}.")


def _require_actor(actor_id: Optional[int]) -> int:
    if actor_id is None:
        raise AuthorizationError("This view requires a signed-in user.")
    return int(actor_id)


def parse_status_filter(status_filter: Optional[str]) -> Optional[TransactionStatus]:
    """Only "Finished" and "Pending" (any case) filter; anything else means all."""
    text = (status_filter or "").strip().lower()
    for status in TransactionStatus:
        if text == status.value.lower():
            return status
    return None


def customer_policy(operation: Operation, *, actor_id: Optional[int] = None, **_) -> Query:
    if operation == Operation.LIST_TRANSACTIONS:
        return Query().where(eq("customer_id", _require_actor(actor_id))).ordered(*NEWEST_TRANSACTIONS_FIRST)
    raise _not_allowed(Role.CUSTOMER, operation)


def receptionist_policy(operation: Operation, **_) -> Query:
    if operation == Operation.LIST_TRANSACTIONS:
        # Assignment queue
        return (
            Query()
            .where(eq("status", TransactionStatus.PENDING), is_null("laundry_staff_id"))
            .ordered(*OLDEST_TRANSACTIONS_FIRST)
        )
    if operation == Operation.LIST_USERS:
        # Assignment target pool
        return Query().where(eq("role", Role.LAUNDRY_STAFF)).ordered(("user_id", False))
    raise _not_allowed(Role.RECEPTIONIST, operation)


def laundry_staff_policy(operation: Operation, *, actor_id: Optional[int] = None, **_) -> Query:
    if operation == Operation.LIST_TRANSACTIONS:
        return (
            Query()
            .where(eq("laundry_staff_id", _require_actor(actor_id)), eq("status", TransactionStatus.PENDING))
            .ordered(*NEWEST_TRANSACTIONS_FIRST)
        )
    raise _not_allowed(Role.LAUNDRY_STAFF, operation)


def admin_policy(operation: Operation, *, status_filter: Optional[str] = None, **_) -> Query:
    if operation == Operation.LIST_TRANSACTIONS:
        query = Query().ordered(*NEWEST_TRANSACTIONS_FIRST)
        status = parse_status_filter(status_filter)
        return query.where(eq("status", status)) if status else query
    if operation == Operation.LIST_USERS:
        return Query().where(one_of("role", EMPLOYEE_ROLES)).ordered(("user_id", False))
    raise _not_allowed(Role.ADMIN, operation)


ROLE_POLICIES: dict[Role, Policy] = {
    Role.CUSTOMER: customer_policy,
    Role.RECEPTIONIST: receptionist_policy,
    Role.LAUNDRY_STAFF: laundry_staff_policy,
    Role.ADMIN: admin_policy,
}

_missing = set(Role) - set(ROLE_POLICIES)
if _missing:
    raise RuntimeError(f"No query policy for roles: {sorted(r.value for r in _missing)}")


def policy_for(
    role: Role,
    operation: Operation,
    *,
    actor_id: Optional[int] = None,
    status_filter: Optional[str] = None,
) -> Query:
    return ROLE_POLICIES[Role(role)](operation, actor_id=actor_id, status_filter=status_filter)
