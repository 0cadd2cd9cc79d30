from __future__ import annotations

import logging
from typing import Any, Sequence

from ..core.exceptions import NotFoundError
from ..core.result import returns_result
from ..validation.rules import check_service
from .model import LaundryService
from .repository import ServiceRepository

logger = logging.getLogger(__name__)


class CatalogService:
    """Use cases: admin maintains the list of laundry services."""

    def __init__(self, services: ServiceRepository):
        self._services = services

    @returns_result
    def list_services(self) -> Sequence[LaundryService]:
        return self._services.list_all()

    @returns_result
    def add_service(self, *, name: str, description: str, price: Any, duration: Any) -> int:
        data = check_service(name, description, price, duration).raise_for_reason()
        service_id = self._services.create_service(
            name=data.name,
            description=data.description,
            price=data.price,
            duration_days=data.duration_days,
        )
        logger.info("Created service service_id=%s", service_id)
        return service_id

    @returns_result
    def delete_service(self, service_id: int) -> None:
        if not self._services.delete_by_id(int(service_id)):
            raise NotFoundError("Service not found.")
        logger.info("Deleted service service_id=%s", service_id)
