from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Sequence, Union

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import today_local
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..core.result import returns_result
from ..policies.query_policies import Operation, policy_for
from ..validation.rules import AccountInput, check_customer_registration, check_employee
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    username: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    @returns_result
    def authenticate(self, username: str, password: str) -> SessionUser:
        # Usernames are stored trimmed.
        username = str(username or "").strip()
        if not username or not password:
            raise ValidationError("Username and Password cannot be empty.")
        password = str(password)

        user = self._users.get_by_username(username)
        if not user:
            raise AuthenticationError("Invalid Username or Password.")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder or legacy plaintext values in the password column
            ok = False

        if not ok:
            logger.info("Failed login for username=%r", username)
            raise AuthenticationError("Invalid Username or Password.")

        logger.info("User %s logged in as %s", user.user_id, user.role.value)
        return SessionUser(user_id=user.user_id, username=user.username, role=user.role)


class UserService:
    """Use cases: customer registration, employee management, staff lookup."""

    def __init__(self, users: UserRepository, *, today: Callable[[], date] = today_local):
        self._users = users
        self._today = today

    def _save(self, account: AccountInput) -> int:
        user_id = self._users.create_user(
            username=account.username,
            email=account.email,
            password_hash=generate_password_hash(account.password),
            gender=account.gender,
            date_of_birth=account.date_of_birth,
            role=account.role,
        )
        logger.info("Created %s account user_id=%s", account.role.value, user_id)
        return user_id

    @returns_result
    def register_customer(
        self,
        *,
        username: str,
        email: str,
        password: str,
        confirm_password: str,
        gender: Optional[str],
        date_of_birth: Union[date, str, None],
    ) -> int:
        account = check_customer_registration(
            username=username,
            email=email,
            password=password,
            confirm_password=confirm_password,
            gender=gender,
            date_of_birth=date_of_birth,
            username_taken=self._users.username_exists,
            email_taken=self._users.email_exists,
            today=self._today(),
        ).raise_for_reason()
        return self._save(account)

    @returns_result
    def add_employee(
        self,
        *,
        username: str,
        email: str,
        password: str,
        confirm_password: str,
        gender: Optional[str],
        date_of_birth: Union[date, str, None],
        role: Union[Role, str, None],
    ) -> int:
        account = check_employee(
            username=username,
            email=email,
            password=password,
            confirm_password=confirm_password,
            gender=gender,
            date_of_birth=date_of_birth,
            role=role,
            username_taken=self._users.username_exists,
            email_taken=self._users.email_exists,
            today=self._today(),
        ).raise_for_reason()
        return self._save(account)

    @returns_result
    def list_employees(self) -> Sequence[User]:
        return self._users.find(policy_for(Role.ADMIN, Operation.LIST_USERS))

    @returns_result
    def list_laundry_staff(self) -> Sequence[User]:
        return self._users.find(policy_for(Role.RECEPTIONIST, Operation.LIST_USERS))
