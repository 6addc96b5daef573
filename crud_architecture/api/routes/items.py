"""Items — list/create/update/delete for the sample Item resource.

Invariants:
    - Mounted at /api/v1/items with the default controller transaction mapping
    - No hooks: behavior is exactly the repository's
"""

from crud_architecture.assemblies.item import ItemAssembly
from crud_architecture.base.router import crud_router
from crud_architecture.models.item import Item
from crud_architecture.schemas.item import ItemDto

router = crud_router(
    prefix="/api/v1/items",
    dto_type=ItemDto,
    entity_type=Item,
    assembly=ItemAssembly(),
    tags=["items"],
)
