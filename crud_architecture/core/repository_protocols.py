"""Boundary Protocols — contracts between the CRUD core and the persistence shell.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO through an AsyncSession
"""

from typing import Protocol, TypeVar

from crud_architecture.core.domain_types import RecordId

E = TypeVar("E")


class PersistenceRepository(Protocol[E]):
    """Contract for the find-all / find-by-id / persist / delete-by-id primitive."""
    async def find_all(self) -> list[E]: ...
    async def find_by_id(self, record_id: RecordId) -> E | None: ...
    async def persist(self, entity: E) -> None: ...
    async def delete_by_id(self, record_id: RecordId) -> bool: ...
