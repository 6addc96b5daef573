"""Item ORM — sample resource served through the generic CRUD stack.

Invariants:
    - id is the integer primary key inherited from Entity
    - name is non-nullable, at most 200 chars
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from crud_architecture.db.base import Entity


class Item(Entity):
    """A named record."""
    __tablename__ = "items"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
