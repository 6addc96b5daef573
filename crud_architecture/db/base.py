"""SQLAlchemy Declarative Base — shared base classes for all ORM models.

Invariants:
    - All models inherit from Base
    - Every CRUD-managed model inherits from Entity (integer autoincrement `id`)
    - Base is the single source of truth for table metadata

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - Entity is __abstract__: it contributes the identity column, never a table
"""

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Entity(Base):
    """Persistable record with a numeric identity."""
    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
