from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import LaundryService


class ServiceRepository(Protocol):
    def get_by_id(self, service_id: int) -> Optional[LaundryService]:
        raise NotImplementedError

    def list_all(self) -> Sequence[LaundryService]:
        raise NotImplementedError

    def create_service(self, *, name: str, description: str, price: int, duration_days: int) -> int:
        raise NotImplementedError

    def delete_by_id(self, service_id: int) -> bool:
        raise NotImplementedError
