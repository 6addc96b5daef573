"""ORM Models — SQLAlchemy declarative models managed through the CRUD base classes.

Invariants:
    - All models inherit from Entity (db/base.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from crud_architecture.models.item import Item  # noqa: F401
