"""
Layered API — Entity/DTO Mappers
=================================

What:  Pure functions converting wire-level request/response shapes to and
       from domain entities, grouped per entity behind one interface.
How:   CrudService receives a mapper through its constructor and calls
       to_entity() on the write path and to_response() on every result.

Mapper Inventory:
    - UserMapper:  passthrough (wire shape equals domain shape)
    - OrderMapper: {id, userId} → Order(id, user=User(userId, ""))
                   Order(id, user) → {id, user: {id, name}}

Known asymmetry (OrderMapper):
    The write path only knows the user's id, so to_entity() leaves the name
    empty. Reading through the relational backend backfills it with a join;
    the in-memory backend keeps whatever was written, so an order created
    in memory reads back with name "". This is reported, not patched.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Union

from layered_api.schemas.order import (
    CreateOrderRequest,
    Order,
    OrderResponse,
    OrderUser,
    UpdateOrderRequest,
)
from layered_api.schemas.user import (
    CreateUserRequest,
    UpdateUserRequest,
    User,
    UserResponse,
)

Req = TypeVar("Req")
Resp = TypeVar("Resp")
E = TypeVar("E")


class EntityMapper(ABC, Generic[Req, Resp, E]):
    """Maps request DTO → entity and entity → response DTO."""

    @abstractmethod
    def to_entity(self, request: Req) -> E:
        """Map a request DTO to the domain entity stored by the repository."""
        ...

    @abstractmethod
    def to_response(self, entity: E) -> Resp:
        """Map a stored entity to the shape returned to clients."""
        ...


UserRequest = Union[CreateUserRequest, UpdateUserRequest, User]
OrderRequest = Union[CreateOrderRequest, UpdateOrderRequest]


class UserMapper(EntityMapper[UserRequest, UserResponse, User]):
    def to_entity(self, request: UserRequest) -> User:
        return User(id=request.id, name=request.name)

    def to_response(self, entity: User) -> UserResponse:
        return UserResponse(id=entity.id, name=entity.name)


class OrderMapper(EntityMapper[OrderRequest, OrderResponse, Order]):
    def to_entity(self, request: OrderRequest) -> Order:
        # Placeholder user: only the foreign key is known on the write path.
        return Order(id=request.id, user=User(id=request.user_id, name=""))

    def to_response(self, entity: Order) -> OrderResponse:
        return OrderResponse(
            id=entity.id,
            user=OrderUser(id=entity.user.id, name=entity.user.name),
        )
