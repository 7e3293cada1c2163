"""
Layered API — Relational Repositories
======================================

What:  SQLAlchemy-backed implementations of Repository[User] and
       Repository[Order].
How:   Each operation opens its own session from the injected factory and
       runs exactly one statement (Order delete adds a reverse lookup of the
       deleted order's user). All values travel as bound parameters.
Who:   Selected by the composition root when the relational backend is
       enabled for an entity.

Query plans:
    users.get_all    SELECT id, name FROM users ORDER BY id
    users.get_by_id  SELECT id, name FROM users WHERE id = :id
    users.create     INSERT INTO users (id, name) VALUES (:id, :name)
    users.update     UPDATE users SET name = :name WHERE id = :id      (rowcount checked)
    users.delete     DELETE FROM users WHERE id = :id RETURNING id, name

    orders.get_all   SELECT o.id, u.id, u.name FROM orders o JOIN users u
                     ON u.id = o.user_id ORDER BY o.id
    orders.get_by_id same join, WHERE o.id = :id
    orders.create    INSERT INTO orders (id, user_id) VALUES (:id, :user_id)
    orders.update    UPDATE orders SET user_id = :user_id WHERE id = :id (rowcount checked)
    orders.delete    DELETE FROM orders WHERE id = :id RETURNING id, user_id
                     then SELECT id, name FROM users WHERE id = :user_id

Errors:
    Missing rows raise NotFoundError. Everything else (IntegrityError for a
    duplicate id or an unknown user, connection failures) propagates as the
    driver raised it. No retries, no multi-statement transactions.
"""

import logging
from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from layered_api.exceptions import NotFoundError
from layered_api.models.order import OrderRecord
from layered_api.models.user import UserRecord
from layered_api.repositories.base import Repository
from layered_api.schemas.envelope import Envelope
from layered_api.schemas.order import Order
from layered_api.schemas.user import User

logger = logging.getLogger(__name__)


class SqlRepository:
    """Holds the session factory shared by the relational repositories."""

    entity_name = "Resource"

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sessions = session_factory

    def _not_found(self, entity_id: int) -> NotFoundError:
        return NotFoundError(entity=self.entity_name, entity_id=entity_id)


class SqlUserRepository(SqlRepository, Repository[User]):
    """Repository[User] over the `users` table."""

    entity_name = "User"

    async def get_all(self) -> Envelope[List[User]]:
        async with self._sessions() as session:
            result = await session.execute(
                select(UserRecord.id, UserRecord.name).order_by(UserRecord.id)
            )
            users = [User(id=row.id, name=row.name) for row in result]
        return Envelope.ok(users)

    async def get_by_id(self, entity_id: int) -> Envelope[User]:
        async with self._sessions() as session:
            result = await session.execute(
                select(UserRecord.id, UserRecord.name).where(UserRecord.id == entity_id)
            )
            row = result.first()
        if row is None:
            raise self._not_found(entity_id)
        return Envelope.ok(User(id=row.id, name=row.name))

    async def create(self, entity: User) -> Envelope[User]:
        async with self._sessions() as session, session.begin():
            await session.execute(
                insert(UserRecord).values(id=entity.id, name=entity.name)
            )
        logger.debug("User %s inserted", entity.id)
        return Envelope.ok(entity)

    async def update(self, entity_id: int, entity: User) -> Envelope[User]:
        async with self._sessions() as session, session.begin():
            result = await session.execute(
                update(UserRecord)
                .where(UserRecord.id == entity_id)
                .values(name=entity.name)
                .execution_options(synchronize_session=False)
            )
            affected = result.rowcount
        if affected == 0:
            raise self._not_found(entity_id)
        return Envelope.ok(entity)

    async def delete(self, entity_id: int) -> Envelope[User]:
        async with self._sessions() as session, session.begin():
            result = await session.execute(
                delete(UserRecord)
                .where(UserRecord.id == entity_id)
                .returning(UserRecord.id, UserRecord.name)
                .execution_options(synchronize_session=False)
            )
            row = result.first()
        if row is None:
            raise self._not_found(entity_id)
        return Envelope.ok(User(id=row.id, name=row.name))


class SqlOrderRepository(SqlRepository, Repository[Order]):
    """
    Repository[Order] over the `orders` table.

    Only the user's id is written; every read joins `users` so the returned
    order always carries the user's current name.
    """

    entity_name = "Order"

    @staticmethod
    def _joined_select():
        return select(
            OrderRecord.id.label("id"),
            UserRecord.id.label("user_id"),
            UserRecord.name.label("user_name"),
        ).join(UserRecord, UserRecord.id == OrderRecord.user_id)

    @staticmethod
    def _to_order(row) -> Order:
        return Order(id=row.id, user=User(id=row.user_id, name=row.user_name))

    async def get_all(self) -> Envelope[List[Order]]:
        async with self._sessions() as session:
            result = await session.execute(
                self._joined_select().order_by(OrderRecord.id)
            )
            orders = [self._to_order(row) for row in result]
        return Envelope.ok(orders)

    async def get_by_id(self, entity_id: int) -> Envelope[Order]:
        async with self._sessions() as session:
            result = await session.execute(
                self._joined_select().where(OrderRecord.id == entity_id)
            )
            row = result.first()
        if row is None:
            raise self._not_found(entity_id)
        return Envelope.ok(self._to_order(row))

    async def create(self, entity: Order) -> Envelope[Order]:
        async with self._sessions() as session, session.begin():
            await session.execute(
                insert(OrderRecord).values(id=entity.id, user_id=entity.user.id)
            )
        logger.debug("Order %s inserted for user %s", entity.id, entity.user.id)
        return Envelope.ok(entity)

    async def update(self, entity_id: int, entity: Order) -> Envelope[Order]:
        async with self._sessions() as session, session.begin():
            result = await session.execute(
                update(OrderRecord)
                .where(OrderRecord.id == entity_id)
                .values(user_id=entity.user.id)
                .execution_options(synchronize_session=False)
            )
            affected = result.rowcount
        if affected == 0:
            raise self._not_found(entity_id)
        return Envelope.ok(entity)

    async def delete(self, entity_id: int) -> Envelope[Order]:
        async with self._sessions() as session, session.begin():
            result = await session.execute(
                delete(OrderRecord)
                .where(OrderRecord.id == entity_id)
                .returning(OrderRecord.id, OrderRecord.user_id)
                .execution_options(synchronize_session=False)
            )
            deleted = result.first()
            if deleted is None:
                raise self._not_found(entity_id)
            owner = await session.execute(
                select(UserRecord.id, UserRecord.name).where(UserRecord.id == deleted.user_id)
            )
            user_row = owner.one()
        return Envelope.ok(
            Order(id=deleted.id, user=User(id=user_row.id, name=user_row.name))
        )
