"""
Layered API — User SQLAlchemy Model
====================================

What:  ORM mapping of the `users` table used by the relational backend.
Who:   Queried by SqlUserRepository; joined by SqlOrderRepository.

Ids are supplied by the client (no autoincrement); a duplicate id surfaces
as an IntegrityError from the database.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from layered_api.database import Base


class UserRecord(Base):
    """One row of `users`."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<UserRecord(id={self.id}, name='{self.name}')>"
