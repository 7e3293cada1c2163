"""
Layered API — CRUD Route Factory
=================================

What:  Builds the five REST endpoints for one entity:

           GET    {prefix}          → controller.get_all()
           GET    {prefix}/{id}     → controller.get_by_id(id)
           POST   {prefix}          → controller.create(body)
           PUT    {prefix}/{id}     → controller.update(id, body)
           DELETE {prefix}/{id}     → controller.delete(id)

How:   build_crud_router() closes over the entity's request models, so the
       same factory serves users and orders. The controller is looked up on
       app.state.container at request time.
Who:   Mounted by main.create_app().

Routes stay thin: path/body extraction only. Status codes come from the
controller (200 or 500).
"""

from typing import Any, Callable, Dict, Type

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from layered_api.controllers.crud_controller import CrudController
from layered_api.schemas.envelope import Envelope


class FailureEnvelope(BaseModel):
    """Documented shape of every 500 body."""

    success: bool = False
    message: str


def users_controller(request: Request) -> CrudController:
    return request.app.state.container.users


def orders_controller(request: Request) -> CrudController:
    return request.app.state.container.orders


def build_crud_router(
    *,
    prefix: str,
    tag: str,
    controller_dependency: Callable[[Request], CrudController],
    create_model: Type[BaseModel],
    update_model: Type[BaseModel],
    response_model: Type[BaseModel],
) -> APIRouter:
    """
    Create an APIRouter exposing the CRUD capability set under `prefix`.

    Args:
        prefix: Mount path, e.g. "/api/users"
        tag: OpenAPI tag
        controller_dependency: Resolves the entity's controller per request
        create_model: Pydantic model for POST bodies
        update_model: Pydantic model for PUT bodies
        response_model: DTO documented inside the success envelope
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    single: Dict[int | str, Dict[str, Any]] = {
        200: {"model": Envelope[response_model]},
        500: {"model": FailureEnvelope, "description": "Any failure, including not found"},
    }
    many: Dict[int | str, Dict[str, Any]] = {
        200: {"model": Envelope[list[response_model]]},
        500: {"model": FailureEnvelope},
    }

    @router.get("", responses=many, summary=f"List all {tag.lower()}")
    async def get_all(
        controller: CrudController = Depends(controller_dependency),
    ) -> JSONResponse:
        return await controller.get_all()

    @router.get("/{entity_id}", responses=single, summary="Get one by id")
    async def get_by_id(
        entity_id: int,
        controller: CrudController = Depends(controller_dependency),
    ) -> JSONResponse:
        return await controller.get_by_id(entity_id)

    @router.post("", responses=single, summary="Create")
    async def create(
        body: create_model,  # type: ignore[valid-type]
        controller: CrudController = Depends(controller_dependency),
    ) -> JSONResponse:
        return await controller.create(body)

    @router.put("/{entity_id}", responses=single, summary="Replace by id")
    async def update(
        entity_id: int,
        body: update_model,  # type: ignore[valid-type]
        controller: CrudController = Depends(controller_dependency),
    ) -> JSONResponse:
        return await controller.update(entity_id, body)

    @router.delete("/{entity_id}", responses=single, summary="Delete by id")
    async def delete(
        entity_id: int,
        controller: CrudController = Depends(controller_dependency),
    ) -> JSONResponse:
        return await controller.delete(entity_id)

    return router
