"""Assembly — bidirectional DTO ↔ Entity mapping plus attached/detached merge.

Invariants:
    - to_entity() and to_dto() have no side effects (no session, no IO)
    - merge_into_attached() never touches primary-key columns and returns `attached`
    - merge_into_attached() is idempotent
    - Exactly one merge operation per assembly

Design Decisions:
    - Plain generic base over ABC: subclasses fail loudly with NotImplementedError
    - Default merge walks the SQLAlchemy mapper (column_attrs), so concrete
      assemblies rarely need to override it
    - Every mutable column is copied, unset ones included: a detached entity
      that leaves a column unset clears it on the attached one
"""

from typing import Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect

from crud_architecture.db.base import Entity

D = TypeVar("D", bound=BaseModel)
E = TypeVar("E", bound=Entity)


def mutable_column_keys(entity_type: type[Entity]) -> list[str]:
    """Mapped column attribute names, primary key excluded."""
    return [
        attr.key
        for attr in inspect(entity_type).column_attrs
        if not any(column.primary_key for column in attr.columns)
    ]


class Assembly(Generic[D, E]):
    """Converts one DTO type to one Entity type and back."""

    def to_entity(self, dto: D) -> E:
        """Build a new (detached) entity filled with the DTO's data."""
        raise NotImplementedError

    def to_dto(self, entity: E) -> D:
        """Build a DTO filled with the entity's data."""
        raise NotImplementedError

    def merge_into_attached(self, attached: E, detached: E) -> E:
        """Copy every mutable field from `detached` into `attached`.

        `attached` keeps its identity. Returns `attached`.
        """
        for key in mutable_column_keys(type(attached)):
            setattr(attached, key, getattr(detached, key))
        return attached


class FieldMappedAssembly(Assembly[D, E]):
    """Assembly that maps DTO fields onto same-named entity columns.

    Subclasses set `dto_type` and `entity_type`, or pass them to __init__.
    DTO fields with no matching column are ignored on the way in; the DTO is
    validated from entity attributes on the way out.
    """

    dto_type: type[D]
    entity_type: type[E]

    def __init__(
        self, dto_type: type[D] | None = None, entity_type: type[E] | None = None,
    ):
        if dto_type is not None:
            self.dto_type = dto_type
        if entity_type is not None:
            self.entity_type = entity_type

    def to_entity(self, dto: D) -> E:
        columns = set(mutable_column_keys(self.entity_type))
        return self.entity_type(**dto.model_dump(include=columns))

    def to_dto(self, entity: E) -> D:
        return self.dto_type.model_validate(entity, from_attributes=True)
