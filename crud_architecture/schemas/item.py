"""Item DTO — request/response shape for /api/v1/items.

Invariants:
    - name: 1-200 chars, stripped, non-empty
    - id is output-only: ignored on create, never copied over a stored id on update
"""

from pydantic import BaseModel, Field, field_validator


class ItemDto(BaseModel):
    """Item as seen by API clients."""
    id: int | None = None
    name: str = Field(min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v
