"""
Layered API — CRUD Controller (Request Handling Layer)
=======================================================

What:  Translates inbound calls into CrudService invocations and maps each
       outcome to a transport result.
How:   Every handler runs its service call through _handle(), which knows
       exactly two outcomes:

           success                      → 200, body = envelope
           any failure (raised error)   → 500, body = failure envelope

Who:   Called by the routers built in routes/crud.py.

Known limitation:
    "User not found" and "database unreachable" both return 500 with the same
    {"success": false, "message": ...} shape. There is no 404.
"""

import logging
from typing import Awaitable, Callable, Generic, TypeVar

from fastapi.responses import JSONResponse

from layered_api.exceptions import LayeredApiError, failure_envelope
from layered_api.middleware.request_id import request_id_var
from layered_api.schemas.envelope import Envelope
from layered_api.services.crud_service import CrudService

logger = logging.getLogger(__name__)

Req = TypeVar("Req")
Resp = TypeVar("Resp")

SUCCESS_STATUS = 200
FAILURE_STATUS = 500


class CrudController(Generic[Req, Resp]):
    """
    One handler per capability for a single entity.

    Args:
        service: Business-logic layer for the entity
        resource: Plural resource name used in log lines ("users", "orders")
    """

    def __init__(self, service: CrudService[Req, Resp, object], resource: str):
        self.service = service
        self.resource = resource

    async def _handle(
        self,
        action: str,
        operation: Callable[[], Awaitable[Envelope[object]]],
    ) -> JSONResponse:
        try:
            envelope = await operation()
        except LayeredApiError as exc:
            logger.warning(
                "[%s] %s %s failed: %s",
                request_id_var.get(""), self.resource, action, exc.message,
            )
            return JSONResponse(status_code=FAILURE_STATUS, content=exc.to_envelope())
        except Exception as exc:
            logger.error(
                "[%s] %s %s failed: %s",
                request_id_var.get(""), self.resource, action, exc,
                exc_info=True,
            )
            return JSONResponse(status_code=FAILURE_STATUS, content=failure_envelope(exc))
        return JSONResponse(status_code=SUCCESS_STATUS, content=envelope.to_body())

    async def get_all(self) -> JSONResponse:
        return await self._handle("get_all", self.service.get_all)

    async def get_by_id(self, entity_id: int) -> JSONResponse:
        return await self._handle("get_by_id", lambda: self.service.get_by_id(entity_id))

    async def create(self, request: Req) -> JSONResponse:
        return await self._handle("create", lambda: self.service.create(request))

    async def update(self, entity_id: int, request: Req) -> JSONResponse:
        return await self._handle("update", lambda: self.service.update(entity_id, request))

    async def delete(self, entity_id: int) -> JSONResponse:
        return await self._handle("delete", lambda: self.service.delete(entity_id))
