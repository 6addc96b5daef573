"""SQLAlchemy Repository — PersistenceRepository implementation over an AsyncSession.

Invariants:
    - One repository per (request session, entity type); never shared across requests
    - persist() flushes, so generated identities are populated before it returns
    - delete_by_id() of an absent id is a no-op returning False
    - Commit is NOT done here: the transaction boundary belongs to the caller

Design Decisions:
    - session.get() for find_by_id: served from the identity map when already loaded
    - Load-then-delete over a bulk DELETE: keeps ORM cascades and the identity map consistent
"""

import logging
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from crud_architecture.core.domain_types import RecordId
from crud_architecture.db.base import Entity

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class SqlAlchemyRepository(Generic[E]):
    """Find-all / find-by-id / persist / delete-by-id for one Entity type."""

    def __init__(self, db: AsyncSession, entity_type: type[E]):
        self._db = db
        self.entity_type = entity_type

    async def find_all(self) -> list[E]:
        result = await self._db.execute(
            select(self.entity_type).order_by(self.entity_type.id),
        )
        return list(result.scalars().all())

    async def find_by_id(self, record_id: RecordId) -> E | None:
        return await self._db.get(self.entity_type, record_id)

    async def persist(self, entity: E) -> None:
        self._db.add(entity)
        await self._db.flush()

    async def delete_by_id(self, record_id: RecordId) -> bool:
        entity = await self._db.get(self.entity_type, record_id)
        if entity is None:
            logger.debug(
                f"{self.entity_type.__name__} {record_id} not found for delete",
                extra={"entity": self.entity_type.__name__, "record_id": record_id},
            )
            return False
        await self._db.delete(entity)
        await self._db.flush()
        return True
