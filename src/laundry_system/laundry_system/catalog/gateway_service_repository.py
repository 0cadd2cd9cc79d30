from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EntityKind
from ..database.gateway import PersistenceGateway
from ..database.query import Query
from .model import LaundryService
from .repository import ServiceRepository


def _to_service(row: dict) -> LaundryService:
    return LaundryService(
        service_id=int(row["service_id"]),
        name=row["name"],
        description=row["description"],
        price=int(row["price"]),
        duration_days=int(row["duration_days"]),
    )


class GatewayServiceRepository(ServiceRepository):
    def __init__(self, gateway: PersistenceGateway):
        self._gateway = gateway

    def get_by_id(self, service_id: int) -> Optional[LaundryService]:
        row = self._gateway.find_one(EntityKind.SERVICE, int(service_id))
        return _to_service(row) if row else None

    def list_all(self) -> Sequence[LaundryService]:
        rows = self._gateway.find_all(EntityKind.SERVICE, Query().ordered(("service_id", False)))
        return [_to_service(r) for r in rows]

    def create_service(self, *, name: str, description: str, price: int, duration_days: int) -> int:
        return self._gateway.insert(
            EntityKind.SERVICE,
            {"name": name, "description": description, "price": int(price), "duration_days": int(duration_days)},
        )

    def delete_by_id(self, service_id: int) -> bool:
        return self._gateway.delete(EntityKind.SERVICE, int(service_id))
