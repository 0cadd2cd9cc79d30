"""Validation rules applied before any write.

Every check is a pure function returning a :class:`RuleResult`. Rules run in a
fixed order and the first failure wins; nothing here touches the store
directly (uniqueness lookups are passed in as callables).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from ..common.datetime_utils import age_on, parse_iso_date
from ..core import constants as C
from ..core.enums import EMPLOYEE_ROLES, Role
from ..core.exceptions import DomainError, UniquenessError, ValidationError

T = TypeVar("T")

_INT_RE = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class RuleResult(Generic[T]):
    reason: Optional[str] = None
    error: type[DomainError] = ValidationError
    value: Optional[T] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def accept(cls, value: Optional[T] = None) -> "RuleResult[T]":
        return cls(value=value)

    @classmethod
    def reject(cls, reason: str, error: type[DomainError] = ValidationError) -> "RuleResult[T]":
        return cls(reason=reason, error=error)

    def raise_for_reason(self) -> Optional[T]:
        """Return the parsed value, or raise the rejection as a domain error."""
        if not self.ok:
            raise self.error(self.reason)
        return self.value


@dataclass(frozen=True)
class ServiceInput:
    name: str
    description: str
    price: int
    duration_days: int


@dataclass(frozen=True)
class TransactionInput:
    weight: float
    notes: str


@dataclass(frozen=True)
class AccountInput:
    username: str
    email: str
    password: str
    gender: str
    date_of_birth: date
    role: Role


@dataclass(frozen=True)
class AccountPolicy:
    """Rules that differ between self-registration and admin-created employees."""

    email_suffix: str
    email_message: str
    min_age: int
    age_message: str
    allowed_roles: frozenset


CUSTOMER_ACCOUNT = AccountPolicy(
    email_suffix=C.CUSTOMER_EMAIL_SUFFIX,
    email_message=f"Email must end with {C.CUSTOMER_EMAIL_SUFFIX}",
    min_age=C.CUSTOMER_MIN_AGE,
    age_message=f"You must be at least {C.CUSTOMER_MIN_AGE} years old.",
    allowed_roles=frozenset({Role.CUSTOMER}),
)

EMPLOYEE_ACCOUNT = AccountPolicy(
    email_suffix=C.EMPLOYEE_EMAIL_SUFFIX,
    email_message=f"Email must end with '{C.EMPLOYEE_EMAIL_SUFFIX}'.",
    min_age=C.EMPLOYEE_MIN_AGE,
    age_message=f"Employees must be at least {C.EMPLOYEE_MIN_AGE} years old.",
    allowed_roles=EMPLOYEE_ROLES,
)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def parse_int(value: Any) -> Optional[int]:
    """Strict integer parse: optional sign and digits only."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value or "").strip()
    if not _INT_RE.match(text):
        return None
    return int(text)


def parse_decimal(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip()) if not isinstance(value, (int, float)) else float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def check_service(name: str, description: str, price: Any, duration: Any) -> RuleResult[ServiceInput]:
    if is_blank(name) or is_blank(description):
        return RuleResult.reject("Fields cannot be empty")

    price_i = parse_int(price)
    duration_i = parse_int(duration)
    if price_i is None or duration_i is None:
        return RuleResult.reject("Price and Duration must be numbers")

    if price_i <= 0:
        return RuleResult.reject("Price must be > 0")
    if not C.SERVICE_MIN_DURATION_DAYS <= duration_i <= C.SERVICE_MAX_DURATION_DAYS:
        return RuleResult.reject(
            f"Duration must be {C.SERVICE_MIN_DURATION_DAYS}-{C.SERVICE_MAX_DURATION_DAYS} days"
        )

    name = str(name).strip()
    description = str(description).strip()
    # Column widths of Services.ServiceName / ServiceDescription
    if len(name) > C.SERVICE_NAME_MAX_LENGTH:
        return RuleResult.reject(f"Service name cannot exceed {C.SERVICE_NAME_MAX_LENGTH} characters.")
    if len(description) > C.SERVICE_DESCRIPTION_MAX_LENGTH:
        return RuleResult.reject(
            f"Service description cannot exceed {C.SERVICE_DESCRIPTION_MAX_LENGTH} characters."
        )

    return RuleResult.accept(
        ServiceInput(name=name, description=description, price=price_i, duration_days=duration_i)
    )


def check_transaction(weight: Any, notes: Optional[str]) -> RuleResult[TransactionInput]:
    weight_f = parse_decimal(weight)
    if weight_f is None:
        return RuleResult.reject("Weight must be a valid number.")

    if not C.TRANSACTION_MIN_WEIGHT <= weight_f <= C.TRANSACTION_MAX_WEIGHT:
        return RuleResult.reject(
            f"Weight must be between {C.TRANSACTION_MIN_WEIGHT:g} and {C.TRANSACTION_MAX_WEIGHT:g}kg."
        )

    notes = "" if notes is None else str(notes)
    if len(notes) > C.TRANSACTION_NOTES_MAX_LENGTH:
        return RuleResult.reject(f"Notes cannot exceed {C.TRANSACTION_NOTES_MAX_LENGTH} characters.")

    return RuleResult.accept(TransactionInput(weight=weight_f, notes=notes))


def parse_role(value: Union[Role, str, None]) -> Optional[Role]:
    if isinstance(value, Role):
        return value
    text = str(value or "").strip()
    for role in Role:
        if text.lower() in (role.value.lower(), role.name.lower()):
            return role
    return None


def check_account(
    *,
    username: str,
    email: str,
    password: str,
    confirm_password: str,
    gender: Optional[str],
    date_of_birth: Union[date, str, None],
    role: Union[Role, str, None],
    policy: AccountPolicy,
    username_taken: Callable[[str], bool],
    email_taken: Callable[[str], bool],
    today: date,
) -> RuleResult[AccountInput]:
    """Shared account checks; ``policy`` carries the role-specific email/age rules."""
    if (
        is_blank(username)
        or is_blank(email)
        or not password
        or is_blank(gender)
        or is_blank(date_of_birth)
        or is_blank(role)
    ):
        return RuleResult.reject("All fields must be filled.")

    parsed_role = parse_role(role)
    if parsed_role is None or parsed_role not in policy.allowed_roles:
        return RuleResult.reject("Please select a valid role.")

    username = str(username).strip()
    email = str(email).strip()
    password = str(password)
    confirm_password = "" if confirm_password is None else str(confirm_password)

    if username_taken(username):
        return RuleResult.reject("Username already exists.", UniquenessError)

    if not email.endswith(policy.email_suffix):
        return RuleResult.reject(policy.email_message)

    if email_taken(email):
        return RuleResult.reject("Email already exists.", UniquenessError)

    if len(password) < C.PASSWORD_MIN_LENGTH:
        return RuleResult.reject(f"Password must be at least {C.PASSWORD_MIN_LENGTH} characters long.")

    if password != confirm_password:
        return RuleResult.reject("Passwords do not match.")

    if isinstance(date_of_birth, date):
        dob = date_of_birth
    else:
        try:
            dob = parse_iso_date(str(date_of_birth))
        except ValueError:
            return RuleResult.reject("Date of birth must be a valid date (YYYY-MM-DD).")

    if age_on(dob, today) < policy.min_age:
        return RuleResult.reject(policy.age_message)

    return RuleResult.accept(
        AccountInput(
            username=username,
            email=email,
            password=password,
            gender=str(gender).strip(),
            date_of_birth=dob,
            role=parsed_role,
        )
    )


def check_customer_registration(
    *,
    username: str,
    email: str,
    password: str,
    confirm_password: str,
    gender: Optional[str],
    date_of_birth: Union[date, str, None],
    username_taken: Callable[[str], bool],
    email_taken: Callable[[str], bool],
    today: date,
) -> RuleResult[AccountInput]:
    return check_account(
        username=username,
        email=email,
        password=password,
        confirm_password=confirm_password,
        gender=gender,
        date_of_birth=date_of_birth,
        role=Role.CUSTOMER,
        policy=CUSTOMER_ACCOUNT,
        username_taken=username_taken,
        email_taken=email_taken,
        today=today,
    )


def check_employee(
    *,
    username: str,
    email: str,
    password: str,
    confirm_password: str,
    gender: Optional[str],
    date_of_birth: Union[date, str, None],
    role: Union[Role, str, None],
    username_taken: Callable[[str], bool],
    email_taken: Callable[[str], bool],
    today: date,
) -> RuleResult[AccountInput]:
    return check_account(
        username=username,
        email=email,
        password=password,
        confirm_password=confirm_password,
        gender=gender,
        date_of_birth=date_of_birth,
        role=role,
        policy=EMPLOYEE_ACCOUNT,
        username_taken=username_taken,
        email_taken=email_taken,
        today=today,
    )
