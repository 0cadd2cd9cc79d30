from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.enums import EntityKind, Role
from ..database.gateway import PersistenceGateway
from ..database.query import Query, eq
from .model import User
from .repository import UserRepository


def _to_user(row: dict) -> User:
    dob = row["date_of_birth"]
    return User(
        user_id=int(row["user_id"]),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        gender=row["gender"],
        date_of_birth=dob if isinstance(dob, date) else parse_iso_date(str(dob)),
        role=Role(row["role"]),
    )


class GatewayUserRepository(UserRepository):
    def __init__(self, gateway: PersistenceGateway):
        self._gateway = gateway

    def get_by_id(self, user_id: int) -> Optional[User]:
        row = self._gateway.find_one(EntityKind.USER, int(user_id))
        return _to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        rows = self._gateway.find_all(EntityKind.USER, Query().where(eq("username", username)))
        return _to_user(rows[0]) if rows else None

    def username_exists(self, username: str) -> bool:
        return bool(self._gateway.find_all(EntityKind.USER, Query().where(eq("username", username))))

    def email_exists(self, email: str) -> bool:
        return bool(self._gateway.find_all(EntityKind.USER, Query().where(eq("email", email))))

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
        return self._gateway.insert(
            EntityKind.USER,
            {
                "username": username,
                "email": email,
                "password_hash": password_hash,
                "gender": gender,
                "date_of_birth": date_of_birth,
                "role": role,
            },
        )

    def find(self, query: Query) -> Sequence[User]:
        return [_to_user(r) for r in self._gateway.find_all(EntityKind.USER, query)]
