"""Item Assembly — ItemDto ↔ Item via same-named fields."""

from crud_architecture.base.assembly import FieldMappedAssembly
from crud_architecture.models.item import Item
from crud_architecture.schemas.item import ItemDto


class ItemAssembly(FieldMappedAssembly[ItemDto, Item]):
    dto_type = ItemDto
    entity_type = Item
