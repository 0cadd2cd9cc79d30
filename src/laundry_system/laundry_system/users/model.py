from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: Plain data object (no DB access code). Immutable once created.
    """

    user_id: int
    username: str
    email: str
    password_hash: str = field(repr=False)
    gender: str
    date_of_birth: date
    role: Role
