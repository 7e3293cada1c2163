"""
Layered API — In-Memory Repository
===================================

What:  Volatile, list-backed implementation of Repository[E].
How:   One generic class serves every entity; the entity name (used in
       not-found messages) and the seed records are constructor arguments.
       Lookups are linear scans by `id`.

Behavior:
    - get_all() returns records in insertion order.
    - create() appends; a duplicate id silently becomes a second record.
    - update() replaces the first matching record in place (position kept).
    - delete() removes the first matching record and returns it.

Not safe under parallel mutation: there is no lock around the
find-index-then-replace sequence. State is lost when the process restarts.
"""

import logging
from typing import Iterable, List, Optional, TypeVar

from layered_api.exceptions import NotFoundError
from layered_api.repositories.base import Repository
from layered_api.schemas.envelope import Envelope

logger = logging.getLogger(__name__)


# Any record type with an integer `id` attribute.
E = TypeVar("E")


class InMemoryRepository(Repository[E]):
    """
    In-process store for entities identified by an integer `id`.

    Args:
        entity_name: Singular display name, e.g. "User" → "User not found"
        seed: Records present when the repository is created (copied)
    """

    def __init__(self, entity_name: str, seed: Optional[Iterable[E]] = None):
        self.entity_name = entity_name
        self._items: List[E] = list(seed or [])

    def _index_of(self, entity_id: int) -> int:
        for index, item in enumerate(self._items):
            if item.id == entity_id:
                return index
        raise NotFoundError(entity=self.entity_name, entity_id=entity_id)

    async def get_all(self) -> Envelope[List[E]]:
        return Envelope.ok(list(self._items))

    async def get_by_id(self, entity_id: int) -> Envelope[E]:
        return Envelope.ok(self._items[self._index_of(entity_id)])

    async def create(self, entity: E) -> Envelope[E]:
        self._items.append(entity)
        logger.debug("%s %s stored in memory (%d total)", self.entity_name, entity.id, len(self._items))
        return Envelope.ok(entity)

    async def update(self, entity_id: int, entity: E) -> Envelope[E]:
        index = self._index_of(entity_id)
        self._items[index] = entity
        return Envelope.ok(entity)

    async def delete(self, entity_id: int) -> Envelope[E]:
        index = self._index_of(entity_id)
        removed = self._items.pop(index)
        return Envelope.ok(removed)
