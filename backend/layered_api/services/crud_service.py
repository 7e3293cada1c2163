"""
Layered API — CRUD Service (Business Logic Layer)
==================================================

What:  Generic business-logic layer: one instance per entity type, holding
       exactly one repository and one mapper.
How:   Every operation maps the request DTO to an entity (writes), forwards
       to the repository, and re-wraps the repository's envelope with the
       mapped response DTO. success/message pass through unchanged.
Who:   Called by CrudController; calls Repository[E] and EntityMapper.

Flow:
    ┌────────────┐  to_entity   ┌──────────────┐
    │ Request DTO│─────────────▶│  Repository  │
    └────────────┘              │  (memory/sql)│
    ┌────────────┐  to_response └──────────────┘
    │Response DTO│◀─────────────  Envelope[E]
    └────────────┘

Error Handling:
    None here. NotFoundError and backend faults raised by the repository
    propagate to the caller unchanged.
"""

from typing import Generic, List, TypeVar

from layered_api.repositories.base import Repository
from layered_api.schemas.envelope import Envelope
from layered_api.services.mappers import EntityMapper

Req = TypeVar("Req")
Resp = TypeVar("Resp")
E = TypeVar("E")


class CrudService(Generic[Req, Resp, E]):
    """
    Business logic for one entity type.

    Args:
        repository: Data-access backend, selected once at composition time
        mapper: DTO ↔ entity conversion for this entity
    """

    def __init__(self, repository: Repository[E], mapper: EntityMapper[Req, Resp, E]):
        self._repository = repository
        self._mapper = mapper

    @property
    def repository(self) -> Repository[E]:
        return self._repository

    def _rewrap(self, result: Envelope[E]) -> Envelope[Resp]:
        return Envelope(
            data=self._mapper.to_response(result.data),
            success=result.success,
            message=result.message,
        )

    async def get_all(self) -> Envelope[List[Resp]]:
        result = await self._repository.get_all()
        return Envelope(
            data=[self._mapper.to_response(item) for item in result.data],
            success=result.success,
            message=result.message,
        )

    async def get_by_id(self, entity_id: int) -> Envelope[Resp]:
        return self._rewrap(await self._repository.get_by_id(entity_id))

    async def create(self, request: Req) -> Envelope[Resp]:
        entity = self._mapper.to_entity(request)
        return self._rewrap(await self._repository.create(entity))

    async def update(self, entity_id: int, request: Req) -> Envelope[Resp]:
        entity = self._mapper.to_entity(request)
        return self._rewrap(await self._repository.update(entity_id, entity))

    async def delete(self, entity_id: int) -> Envelope[Resp]:
        return self._rewrap(await self._repository.delete(entity_id))
