"""
Layered API — Abstract Repository Interface
============================================

What:  Abstract base class defining the data-access capability set
       {get_all, get_by_id, create, update, delete} for one entity type.
How:   Concrete backends (in-memory, relational) implement every method.
       Services depend on Repository[E] only, so backends can be swapped at
       composition time without touching service or controller code.
Who:   Called by CrudService.

Contract shared by every backend:
    - Successful calls return Envelope(data=..., success=True).
    - A missing id raises NotFoundError("<Entity> not found").
    - Backend faults (driver / constraint errors) propagate untranslated.
    - create() performs no uniqueness check on id.
    - update() is a full replace and returns the entity as supplied.
    - delete() returns the value the record had before deletion.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from layered_api.schemas.envelope import Envelope

E = TypeVar("E")


class Repository(ABC, Generic[E]):
    """
    Abstract data-access interface parameterized by entity type.

    Implementations:
        - InMemoryRepository: list-backed, volatile, any entity with an `id`
        - SqlUserRepository / SqlOrderRepository: SQLAlchemy async statements
    """

    @abstractmethod
    async def get_all(self) -> Envelope[List[E]]:
        """Return every entity in backend-defined order."""
        ...

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Envelope[E]:
        """
        Return the entity whose id matches.

        Raises:
            NotFoundError: No entity has this id.
        """
        ...

    @abstractmethod
    async def create(self, entity: E) -> Envelope[E]:
        """Insert the entity and return it."""
        ...

    @abstractmethod
    async def update(self, entity_id: int, entity: E) -> Envelope[E]:
        """
        Replace the record matching entity_id.

        Raises:
            NotFoundError: No entity has this id.
        """
        ...

    @abstractmethod
    async def delete(self, entity_id: int) -> Envelope[E]:
        """
        Remove the record and return its pre-deletion value.

        Raises:
            NotFoundError: No entity has this id.
        """
        ...
