from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles. Values match what is stored in the Users table."""

    CUSTOMER = "Customer"
    ADMIN = "Admin"
    LAUNDRY_STAFF = "Laundry Staff"
    RECEPTIONIST = "Receptionist"


EMPLOYEE_ROLES = frozenset({Role.ADMIN, Role.LAUNDRY_STAFF, Role.RECEPTIONIST})


class TransactionStatus(str, Enum):
    PENDING = "Pending"
    FINISHED = "Finished"


class EntityKind(str, Enum):
    """Entity kinds understood by the persistence gateway."""

    USER = "user"
    SERVICE = "service"
    TRANSACTION = "transaction"
    NOTIFICATION = "notification"
