"""CRUD Controller — list / create / update / delete orchestration over Service + Assembly.

Invariants:
    - Every operation runs before_* → service/assembly work → after_* in-line
    - create/update/delete answer 204 No Content; find answers the DTO list
    - update merges the request DTO into the stored (attached) entity, never
      persists a detached entity directly
    - update of an absent id raises ResourceNotFoundError (404)
    - Controller hooks are a separate set from ServiceHooks (presentation vs business)

Design Decisions:
    - Transaction boundaries are class-level configuration (`transactions`),
      applied by the router, not code inside the operations
    - Controllers are built per request around that request's service
"""

from typing import ClassVar, Generic, TypeVar

from fastapi import Response, status
from pydantic import BaseModel

from crud_architecture.base.assembly import Assembly
from crud_architecture.base.service import CrudService
from crud_architecture.core.domain_types import CrudOperation, RecordId, TxMode
from crud_architecture.core.errors import ErrorContext, ResourceNotFoundError


D = TypeVar("D", bound=BaseModel)
E = TypeVar("E")


class ControllerHooks(Generic[D]):
    """Presentation-layer extension points. All default to no-ops."""

    async def before_find(self) -> None:
        pass

    async def after_find(self, dtos: list[D]) -> None:
        pass

    async def before_create(self, dto: D) -> None:
        pass

    async def after_create(self) -> None:
        pass

    async def before_update(self, record_id: RecordId, dto: D) -> None:
        pass

    async def after_update(self) -> None:
        pass

    async def before_delete(self, record_id: RecordId) -> None:
        pass

    async def after_delete(self) -> None:
        pass


def no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


class CrudController(Generic[D, E]):
    """Boilerplate GET / POST / PUT / DELETE behavior for one resource."""

    transactions: ClassVar[dict[CrudOperation, TxMode]] = {
        CrudOperation.LIST: TxMode.NEVER,
        CrudOperation.CREATE: TxMode.REQUIRED,
        CrudOperation.UPDATE: TxMode.REQUIRED,
        CrudOperation.DELETE: TxMode.REQUIRED,
    }

    def __init__(
        self,
        service: CrudService[E],
        assembly: Assembly[D, E],
        hooks: ControllerHooks[D] | None = None,
    ):
        self.service = service
        self.assembly = assembly
        self.hooks = hooks or ControllerHooks()

    async def find(self) -> list[D]:
        """Handle GET: every stored record as a DTO."""
        await self.hooks.before_find()
        dtos = [self.assembly.to_dto(e) for e in await self.service.find()]
        await self.hooks.after_find(dtos)
        return dtos

    async def create(self, dto: D) -> Response:
        """Handle POST: store a new record built from the request body."""
        await self.hooks.before_create(dto)
        await self.service.create(self.assembly.to_entity(dto))
        await self.hooks.after_create()
        return no_content()

    async def update(self, record_id: RecordId, dto: D) -> Response:
        """Handle PUT: merge the request body into the stored record."""
        await self.hooks.before_update(record_id, dto)
        attached = await self.service.find_by_id(record_id)
        if attached is None:
            raise ResourceNotFoundError(
                self.service.entity_name, str(record_id),
                ErrorContext(
                    entity=self.service.entity_name,
                    record_id=record_id,
                    operation=CrudOperation.UPDATE.value,
                ),
            )
        merged = self.assembly.merge_into_attached(
            attached, self.assembly.to_entity(dto),
        )
        await self.service.update(record_id, merged)
        await self.hooks.after_update()
        return no_content()

    async def delete(self, record_id: RecordId) -> Response:
        """Handle DELETE: remove the record with the given id."""
        await self.hooks.before_delete(record_id)
        await self.service.delete(record_id)
        await self.hooks.after_delete()
        return no_content()
