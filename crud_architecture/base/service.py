"""CRUD Service — business-logic wrapper around a PersistenceRepository.

Invariants:
    - Stateless per call: the only state is the injected repository and hooks
    - Every operation runs before_* → repository primitive → after_* in-line
    - A hook exception aborts the operation and propagates unmodified
    - find() and find_by_id() return repository results unmodified
    - find_by_id() of an absent id returns None (no exception)

Design Decisions:
    - Hooks as an injected ServiceHooks object over template-method overrides:
      composition keeps one CrudService class for every entity
    - after_create exists here as well as on the controller, so every write
      has a business-layer after hook
    - No commit here: the transaction boundary is declared on the controller
"""

import logging
from typing import Generic, TypeVar

from crud_architecture.core.domain_types import RecordId
from crud_architecture.core.repository_protocols import PersistenceRepository

logger = logging.getLogger(__name__)

E = TypeVar("E")


class ServiceHooks(Generic[E]):
    """Business-layer extension points. Override what you need; the rest are no-ops."""

    async def before_find(self) -> None:
        """Runs before all entities are fetched."""

    async def after_find(self, entities: list[E]) -> None:
        """Receives the fetched entities."""

    async def before_find_by_id(self, record_id: RecordId) -> None:
        """Runs before a single entity is fetched."""

    async def after_find_by_id(self, entity: E | None) -> None:
        """Receives the fetched entity, or None when absent."""

    async def before_create(self, entity: E) -> None:
        """Receives the entity about to be persisted."""

    async def after_create(self, entity: E) -> None:
        """Receives the persisted entity (identity populated)."""

    async def before_update(self, record_id: RecordId, entity: E) -> None:
        """Receives the id and the merged entity about to be persisted."""

    async def after_update(self, record_id: RecordId, entity: E) -> None:
        """Receives the id and the persisted entity."""

    async def before_delete(self, record_id: RecordId) -> None:
        """Runs before the id is deleted."""

    async def after_delete(self, record_id: RecordId) -> None:
        """Runs after the id is deleted."""


class CrudService(Generic[E]):
    """find / find_by_id / create / update / delete for one Entity type."""

    def __init__(
        self,
        repository: PersistenceRepository[E],
        hooks: ServiceHooks[E] | None = None,
        entity_name: str = "Entity",
    ):
        self.repository = repository
        self.hooks = hooks or ServiceHooks()
        self.entity_name = entity_name

    async def find(self) -> list[E]:
        await self.hooks.before_find()
        entities = await self.repository.find_all()
        await self.hooks.after_find(entities)
        logger.debug(
            f"Found {len(entities)} {self.entity_name} record(s)",
            extra={"entity": self.entity_name, "count": len(entities)},
        )
        return entities

    async def find_by_id(self, record_id: RecordId) -> E | None:
        await self.hooks.before_find_by_id(record_id)
        entity = await self.repository.find_by_id(record_id)
        await self.hooks.after_find_by_id(entity)
        return entity

    async def create(self, entity: E) -> None:
        await self.hooks.before_create(entity)
        await self.repository.persist(entity)
        await self.hooks.after_create(entity)
        logger.info(
            f"{self.entity_name} created",
            extra={
                "entity": self.entity_name,
                "record_id": getattr(entity, "id", None),
                "operation": "create",
            },
        )

    async def update(self, record_id: RecordId, entity: E) -> None:
        await self.hooks.before_update(record_id, entity)
        await self.repository.persist(entity)
        await self.hooks.after_update(record_id, entity)
        logger.info(
            f"{self.entity_name} {record_id} updated",
            extra={
                "entity": self.entity_name,
                "record_id": record_id,
                "operation": "update",
            },
        )

    async def delete(self, record_id: RecordId) -> None:
        await self.hooks.before_delete(record_id)
        deleted = await self.repository.delete_by_id(record_id)
        await self.hooks.after_delete(record_id)
        logger.info(
            f"{self.entity_name} {record_id} "
            f"{'deleted' if deleted else 'already absent'}",
            extra={
                "entity": self.entity_name,
                "record_id": record_id,
                "operation": "delete",
            },
        )
