"""
Layered API — Order SQLAlchemy Model
=====================================

What:  ORM mapping of the `orders` table used by the relational backend.

Table Design:
    - id: client-supplied primary key
    - user_id: foreign key to users.id; the database rejects orders whose
      user does not exist (the in-memory backend performs no such check)

    The user's name is not stored on the order. Reads join `users` to
    materialize the embedded user.
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from layered_api.database import Base


class OrderRecord(Base):
    """One row of `orders`."""

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<OrderRecord(id={self.id}, user_id={self.user_id})>"
