from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from ..database.query import Query
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def username_exists(self, username: str) -> bool:
        raise NotImplementedError

    def email_exists(self, email: str) -> bool:
        raise NotImplementedError

    def create_user(
        self,
        *,
        username: str,
        email: str,
        password_hash: str,
        gender: str,
        date_of_birth: date,
        role: Role,
    ) -> int:
        raise NotImplementedError

    def find(self, query: Query) -> Sequence[User]:
        raise NotImplementedError
