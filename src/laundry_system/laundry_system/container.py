from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from .catalog.gateway_service_repository import GatewayServiceRepository
from .catalog.service import CatalogService
from .common.datetime_utils import today_local
from .core.constants import DEFAULT_BRAND_NAME
from .database.connection import DatabaseConnection, db_config_from_dict
from .database.gateway import PersistenceGateway
from .database.memory_gateway import InMemoryGateway
from .database.mysql_gateway import MySQLGateway
from .notifications.gateway_notification_repository import GatewayNotificationRepository
from .notifications.service import NotificationService
from .transactions.gateway_transaction_repository import GatewayTransactionRepository
from .transactions.service import TransactionService
from .users.gateway_user_repository import GatewayUserRepository
from .users.service import AuthService, UserService

logger = logging.getLogger(__name__)

MYSQL_BACKEND = "mysql"
MEMORY_BACKEND = "memory"


@dataclass(frozen=True)
class Container:
    gateway: PersistenceGateway

    users_repo: GatewayUserRepository
    services_repo: GatewayServiceRepository
    transactions_repo: GatewayTransactionRepository
    notifications_repo: GatewayNotificationRepository

    auth_service: AuthService
    user_service: UserService
    catalog_service: CatalogService
    transaction_service: TransactionService
    notification_service: NotificationService


def build_gateway(*, backend: str = MYSQL_BACKEND, db_config: Optional[dict] = None) -> PersistenceGateway:
    backend = (backend or MYSQL_BACKEND).lower()
    if backend == MEMORY_BACKEND:
        return InMemoryGateway()
    if backend == MYSQL_BACKEND:
        conn = DatabaseConnection.get_instance(db_config_from_dict(db_config or {}))
        return MySQLGateway(conn)
    raise ValueError(f"Unknown store backend: {backend!r}")


def build_container(
    *,
    db_config: Optional[dict] = None,
    backend: str = MYSQL_BACKEND,
    brand: str = DEFAULT_BRAND_NAME,
    gateway: Optional[PersistenceGateway] = None,
    today: Callable[[], date] = today_local,
) -> Container:
    gateway = gateway or build_gateway(backend=backend, db_config=db_config)
    logger.debug("Building container with %s", type(gateway).__name__)

    users_repo = GatewayUserRepository(gateway)
    services_repo = GatewayServiceRepository(gateway)
    transactions_repo = GatewayTransactionRepository(gateway)
    notifications_repo = GatewayNotificationRepository(gateway)

    auth_service = AuthService(users_repo)
    user_service = UserService(users_repo, today=today)
    catalog_service = CatalogService(services_repo)
    transaction_service = TransactionService(transactions_repo, services_repo, users_repo)
    notification_service = NotificationService(notifications_repo, transactions_repo, brand=brand)

    return Container(
        gateway=gateway,
        users_repo=users_repo,
        services_repo=services_repo,
        transactions_repo=transactions_repo,
        notifications_repo=notifications_repo,
        auth_service=auth_service,
        user_service=user_service,
        catalog_service=catalog_service,
        transaction_service=transaction_service,
        notification_service=notification_service,
    )
