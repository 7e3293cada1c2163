"""
Layered API — Relational Repository Tests
==========================================

What:  SqlUserRepository and SqlOrderRepository against a real SQLite file
       (aiosqlite), tables created with create_schema().

What we test:
    ✅ get_all orders by ascending id regardless of insert order
    ✅ create → get_by_id round trip
    ✅ update checks the affected-row count (NotFoundError on 0)
    ✅ delete returns the pre-deletion value, then NotFoundError
    ✅ Duplicate ids and unknown users raise IntegrityError, untranslated
    ✅ Order reads join users to fill in the user's name
"""

import pytest
from sqlalchemy.exc import IntegrityError

from layered_api.exceptions import NotFoundError
from layered_api.repositories.sql import SqlOrderRepository, SqlUserRepository
from layered_api.schemas.order import Order
from layered_api.schemas.user import User


class TestSqlUserRepository:

    @pytest.mark.asyncio
    async def test_get_all_orders_by_id(self, session_factory):
        repo = SqlUserRepository(session_factory)
        await repo.create(User(id=5, name="Eve"))
        await repo.create(User(id=3, name="Carol"))
        await repo.create(User(id=4, name="Dan"))

        result = await repo.get_all()

        assert result.success is True
        assert [u.id for u in result.data] == [3, 4, 5]

    @pytest.mark.asyncio
    async def test_create_then_get_by_id_round_trip(self, seeded_session_factory):
        repo = SqlUserRepository(seeded_session_factory)
        alice = User(id=3, name="Alice")

        created = await repo.create(alice)
        fetched = await repo.get_by_id(created.data.id)

        assert created.data == alice
        assert fetched.data == alice

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises_not_found(self, seeded_session_factory):
        repo = SqlUserRepository(seeded_session_factory)

        with pytest.raises(NotFoundError, match="User not found"):
            await repo.get_by_id(99)

    @pytest.mark.asyncio
    async def test_create_duplicate_id_raises_integrity_error(self, seeded_session_factory):
        repo = SqlUserRepository(seeded_session_factory)

        with pytest.raises(IntegrityError):
            await repo.create(User(id=1, name="Duplicate"))

    @pytest.mark.asyncio
    async def test_update_replaces_and_keeps_cardinality(self, seeded_session_factory):
        repo = SqlUserRepository(seeded_session_factory)

        result = await repo.update(1, User(id=1, name="Johnny"))

        assert result.data == User(id=1, name="Johnny")
        assert (await repo.get_by_id(1)).data.name == "Johnny"
        assert len((await repo.get_all()).data) == 2

    @pytest.mark.asyncio
    async def test_update_missing_id_raises_not_found(self, seeded_session_factory):
        repo = SqlUserRepository(seeded_session_factory)

        with pytest.raises(NotFoundError):
            await repo.update(99, User(id=99, name="Nobody"))

    @pytest.mark.asyncio
    async def test_delete_returns_deleted_row(self, seeded_session_factory):
        repo = SqlUserRepository(seeded_session_factory)

        result = await repo.delete(2)

        assert result.data == User(id=2, name="Jane Doe")
        with pytest.raises(NotFoundError):
            await repo.get_by_id(2)

    @pytest.mark.asyncio
    async def test_delete_missing_id_raises_not_found(self, seeded_session_factory):
        repo = SqlUserRepository(seeded_session_factory)

        with pytest.raises(NotFoundError):
            await repo.delete(99)


class TestSqlOrderRepository:

    @pytest.mark.asyncio
    async def test_reads_join_user_name(self, seeded_session_factory, order_seeder):
        await order_seeder([{"id": 1, "user_id": 1}])
        repo = SqlOrderRepository(seeded_session_factory)

        result = await repo.get_by_id(1)

        assert result.data == Order(id=1, user=User(id=1, name="John Doe"))

    @pytest.mark.asyncio
    async def test_create_stores_only_user_id(self, seeded_session_factory):
        repo = SqlOrderRepository(seeded_session_factory)
        placeholder = Order(id=5, user=User(id=1, name=""))

        created = await repo.create(placeholder)
        fetched = await repo.get_by_id(5)

        # create echoes the input; the read path backfills the name
        assert created.data.user.name == ""
        assert fetched.data.user == User(id=1, name="John Doe")

    @pytest.mark.asyncio
    async def test_get_all_orders_by_id(self, seeded_session_factory, order_seeder):
        await order_seeder(
            [{"id": 3, "user_id": 2}, {"id": 1, "user_id": 1}, {"id": 2, "user_id": 2}],
        )
        repo = SqlOrderRepository(seeded_session_factory)

        result = await repo.get_all()

        assert [o.id for o in result.data] == [1, 2, 3]
        assert [o.user.name for o in result.data] == ["John Doe", "Jane Doe", "Jane Doe"]

    @pytest.mark.asyncio
    async def test_create_for_unknown_user_raises_integrity_error(self, seeded_session_factory):
        repo = SqlOrderRepository(seeded_session_factory)

        with pytest.raises(IntegrityError):
            await repo.create(Order(id=9, user=User(id=404, name="")))

    @pytest.mark.asyncio
    async def test_update_changes_user(self, seeded_session_factory, order_seeder):
        await order_seeder([{"id": 1, "user_id": 1}])
        repo = SqlOrderRepository(seeded_session_factory)

        await repo.update(1, Order(id=1, user=User(id=2, name="")))

        assert (await repo.get_by_id(1)).data.user == User(id=2, name="Jane Doe")

    @pytest.mark.asyncio
    async def test_update_missing_order_raises_not_found(self, seeded_session_factory):
        repo = SqlOrderRepository(seeded_session_factory)

        with pytest.raises(NotFoundError, match="Order not found"):
            await repo.update(77, Order(id=77, user=User(id=1, name="")))

    @pytest.mark.asyncio
    async def test_delete_returns_order_with_its_user(self, seeded_session_factory, order_seeder):
        await order_seeder([{"id": 1, "user_id": 2}])
        repo = SqlOrderRepository(seeded_session_factory)

        result = await repo.delete(1)

        assert result.data == Order(id=1, user=User(id=2, name="Jane Doe"))
        with pytest.raises(NotFoundError):
            await repo.get_by_id(1)

    @pytest.mark.asyncio
    async def test_delete_missing_order_raises_not_found(self, seeded_session_factory):
        repo = SqlOrderRepository(seeded_session_factory)

        with pytest.raises(NotFoundError):
            await repo.delete(1)
