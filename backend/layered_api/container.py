"""
Layered API — Composition Root
===============================

What:  Selects a backend per entity and wires
       repository → service → controller for users and orders.
How:   Built once by create_app() from an explicit Settings object. Nothing
       here is global: each Container owns its repositories (so each app
       instance gets a fresh in-memory store) and, when any entity is
       relational, one engine whose pool is shared by the SQL repositories.
When:  At application construction; torn down by the lifespan on shutdown.

Wiring:
    Settings ──▶ backend_for("users")  ──▶ InMemoryRepository / SqlUserRepository
                                               │
                                  CrudService(repository, UserMapper())
                                               │
                                  CrudController(service, "users")

    (same for orders with OrderMapper / SqlOrderRepository)
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from layered_api.config import BackendKind, Settings
from layered_api.controllers.crud_controller import CrudController
from layered_api.database import create_engine, create_session_factory
from layered_api.repositories.base import Repository
from layered_api.repositories.memory import InMemoryRepository
from layered_api.repositories.sql import SqlOrderRepository, SqlUserRepository
from layered_api.schemas.order import Order
from layered_api.schemas.user import User
from layered_api.services.crud_service import CrudService
from layered_api.services.mappers import OrderMapper, UserMapper

logger = logging.getLogger(__name__)


def seed_users() -> List[User]:
    """Users present in a fresh in-memory backend."""
    return [
        User(id=1, name="John Doe"),
        User(id=2, name="Jane Doe"),
    ]


def seed_orders() -> List[Order]:
    """Orders present in a fresh in-memory backend (embedded users)."""
    return [
        Order(id=1, user=User(id=1, name="John Doe")),
        Order(id=2, user=User(id=2, name="Jane Doe")),
    ]


class Container:
    """
    Holds every wired component of one application instance.

    Attributes:
        settings: The settings this container was built from
        backends: Resolved backend per entity, e.g. {"users": MEMORY, ...}
        engine: Async engine when any entity is relational, else None
        users / orders: Controllers handed to the routers
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.backends: Dict[str, BackendKind] = {
            "users": settings.backend_for("users"),
            "orders": settings.backend_for("orders"),
        }

        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        if BackendKind.RELATIONAL in self.backends.values():
            self.engine = create_engine(settings)
            self.session_factory = create_session_factory(self.engine)

        self.user_repository = self._build_user_repository()
        self.order_repository = self._build_order_repository()

        self.user_service = CrudService(self.user_repository, UserMapper())
        self.order_service = CrudService(self.order_repository, OrderMapper())

        self.users = CrudController(self.user_service, resource="users")
        self.orders = CrudController(self.order_service, resource="orders")

        logger.info(
            "Backends selected: users=%s, orders=%s",
            self.backends["users"].value,
            self.backends["orders"].value,
        )

    @property
    def uses_relational(self) -> bool:
        return self.engine is not None

    def _build_user_repository(self) -> Repository[User]:
        if self.backends["users"] is BackendKind.RELATIONAL:
            return SqlUserRepository(self.session_factory)
        return InMemoryRepository("User", seed_users())

    def _build_order_repository(self) -> Repository[Order]:
        if self.backends["orders"] is BackendKind.RELATIONAL:
            return SqlOrderRepository(self.session_factory)
        return InMemoryRepository("Order", seed_orders())
