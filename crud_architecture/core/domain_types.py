"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId wraps the integer primary key shared by every Entity
    - Transaction modes and CRUD operations encoded as Enums, never raw strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: usable as dict keys in class-level configuration and readable in logs
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", int)


# ─── Enums ───────────────────────────────────────────────────────

class CrudOperation(str, Enum):
    """The four endpoint operations a controller exposes."""
    LIST = "list"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class TxMode(str, Enum):
    """Transaction boundary applied around a controller operation.

    REQUIRED runs the operation inside a single transaction (commit on
    success, rollback on exception). NEVER runs it without opening one
    explicitly; nothing is committed.
    """
    REQUIRED = "required"
    NEVER = "never"
