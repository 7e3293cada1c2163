"""
Layered API — Order Entity and DTOs
====================================

What:  Order domain entity plus its transport-layer request/response shapes.

Write/read asymmetry:
    Requests carry only the foreign key (`userId`). The service synthesizes a
    placeholder user {id: userId, name: ""} when mapping to the entity; the
    relational read path joins `users` to backfill the name. Responses always
    carry the nested user.

        CreateOrderRequest  {"id": 5, "userId": 1}
        Order               Order(id=5, user=User(id=1, name=""))
        OrderResponse       {"id": 5, "user": {"id": 1, "name": "John Doe"}}  (after a read)
"""

from pydantic import BaseModel, Field

from layered_api.schemas.user import User


class Order(BaseModel):
    """Domain entity with an embedded copy of the ordering user."""

    id: int = Field(description="Unique identifier for the order")
    user: User = Field(description="The user who placed this order")


class CreateOrderRequest(BaseModel):
    """Body of POST /api/orders."""

    id: int
    user_id: int = Field(alias="userId")

    model_config = {"populate_by_name": True}


class UpdateOrderRequest(BaseModel):
    """Body of PUT /api/orders/{id}."""

    id: int
    user_id: int = Field(alias="userId")

    model_config = {"populate_by_name": True}


class OrderUser(BaseModel):
    """Nested user as exposed on the wire."""

    id: int
    name: str


class OrderResponse(BaseModel):
    """Order as returned to clients."""

    id: int
    user: OrderUser
