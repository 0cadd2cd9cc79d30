from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from src.laundry_system.laundry_system.container import build_container
from src.laundry_system.laundry_system.core.enums import EntityKind, Role
from src.laundry_system.laundry_system.database.memory_gateway import InMemoryGateway

TODAY = date(2026, 10, 19)


class TickingClock:
    """Each call is one minute after the previous one."""

    def __init__(self, start: datetime = datetime(2026, 10, 19, 8, 0)):
        self._now = start

    def __call__(self) -> datetime:
        current = self._now
        self._now += timedelta(minutes=1)
        return current


def add_user(gateway, username: str, role: Role, *, email: str | None = None) -> int:
    suffix = "@email.com" if role == Role.CUSTOMER else "@govlash.com"
    return gateway.insert(
        EntityKind.USER,
        {
            "username": username,
            "email": email or f"{username}{suffix}",
            "password_hash": "not-a-hash",
            "gender": "Female",
            "date_of_birth": date(1995, 5, 5),
            "role": role,
        },
    )


@pytest.fixture
def gateway():
    return InMemoryGateway(clock=TickingClock())


@pytest.fixture
def container(gateway):
    return build_container(gateway=gateway, today=lambda: TODAY)


@pytest.fixture
def people(gateway):
    """Users 1..5: admin, receptionist, two laundry staff, customer."""
    return {
        "admin": add_user(gateway, "admin", Role.ADMIN),
        "receptionist": add_user(gateway, "reception", Role.RECEPTIONIST),
        "staff": add_user(gateway, "staff", Role.LAUNDRY_STAFF),
        "staff2": add_user(gateway, "staff2", Role.LAUNDRY_STAFF),
        "customer": add_user(gateway, "budi", Role.CUSTOMER),
    }


@pytest.fixture
def wash_service(container):
    result = container.catalog_service.add_service(
        name="Wash & Fold", description="Regular wash", price="8000", duration="2"
    )
    assert result.ok
    return result.value
