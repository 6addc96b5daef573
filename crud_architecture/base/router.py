"""CRUD Router Factory — mounts a CrudController on FastAPI for one resource.

Invariants:
    - Exactly four routes: GET /, POST /, PUT /{id}, DELETE /{id}
    - Each request gets its own AsyncSession → repository → service → controller chain
    - The controller class's `transactions` mapping decides the boundary of every route
    - Request bodies are validated against the resource's DTO type before the controller runs
    - Path ids outside 1..2**63-1 are rejected as validation errors before any query

Design Decisions:
    - FastAPI Depends is the injection mechanism: get_db is cached per request,
      so the controller and the transaction scope share one session
    - Assembly and hook objects are process-wide: they hold no per-request state
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from crud_architecture.base.assembly import Assembly
from crud_architecture.base.controller import ControllerHooks, CrudController
from crud_architecture.base.service import CrudService, ServiceHooks
from crud_architecture.core.domain_types import CrudOperation, RecordId
from crud_architecture.db.base import Entity
from crud_architecture.infrastructure.database import get_db, transaction_scope
from crud_architecture.infrastructure.repository import SqlAlchemyRepository

# Largest value a 64-bit signed primary key column can hold
RECORD_ID_MAX = 2**63 - 1

RecordIdPath = Annotated[int, Path(ge=1, le=RECORD_ID_MAX)]


def crud_router(
    *,
    prefix: str,
    dto_type: type[BaseModel],
    entity_type: type[Entity],
    assembly: Assembly,
    service_hooks: ServiceHooks | None = None,
    controller_hooks: ControllerHooks | None = None,
    controller_class: type[CrudController] = CrudController,
    tags: list[str] | None = None,
) -> APIRouter:
    """Build the list/create/update/delete router for one (DTO, Entity) pair."""
    router = APIRouter(prefix=prefix, tags=tags or [entity_type.__name__.lower()])
    tx = controller_class.transactions

    async def provide_controller(
        db: AsyncSession = Depends(get_db),
    ) -> CrudController:
        service = CrudService(
            SqlAlchemyRepository(db, entity_type),
            service_hooks,
            entity_name=entity_type.__name__,
        )
        return controller_class(service, assembly, controller_hooks)

    @router.get("/", response_model=list[dto_type])
    async def list_records(
        controller: CrudController = Depends(provide_controller),
        db: AsyncSession = Depends(get_db),
    ):
        async with transaction_scope(db, tx[CrudOperation.LIST]):
            return await controller.find()

    @router.post(
        "/", status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
    )
    async def create_record(
        body: dto_type,
        controller: CrudController = Depends(provide_controller),
        db: AsyncSession = Depends(get_db),
    ):
        async with transaction_scope(db, tx[CrudOperation.CREATE]):
            return await controller.create(body)

    @router.put(
        "/{id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
    )
    async def update_record(
        id: RecordIdPath,
        body: dto_type,
        controller: CrudController = Depends(provide_controller),
        db: AsyncSession = Depends(get_db),
    ):
        async with transaction_scope(db, tx[CrudOperation.UPDATE]):
            return await controller.update(RecordId(id), body)

    @router.delete(
        "/{id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
    )
    async def delete_record(
        id: RecordIdPath,
        controller: CrudController = Depends(provide_controller),
        db: AsyncSession = Depends(get_db),
    ):
        async with transaction_scope(db, tx[CrudOperation.DELETE]):
            return await controller.delete(RecordId(id))

    return router
