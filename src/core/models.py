"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the API layer (higher) and the db layer (lower) convert their own representations to/from these records.
Each record names its key field in ``key_field``; every other field is an attribute that an update overwrites.
"""

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Optional


@dataclass
class Game:
    """A game, identified by its (client-assigned) name."""

    key_field: ClassVar[str] = "name"

    name: str
    publisher: str
    rating: str


@dataclass
class Shoe:
    """A shoe. ``id`` stays None until the store assigns one."""

    key_field: ClassVar[str] = "id"

    name: str
    color: str
    brand: str
    id: Optional[int] = None


@dataclass
class UcsbBuilding:
    """A campus building. ``id`` stays None until the store assigns one."""

    key_field: ClassVar[str] = "id"

    name: str
    description: str
    architecture: str
    location: str
    id: Optional[int] = None


def key_of(entity: Any) -> Any:
    """Value of the entity's key field."""
    return getattr(entity, entity.key_field)


def attribute_names(entity_type: type) -> list[str]:
    """Names of all non-key fields, in declaration order."""
    return [f.name for f in fields(entity_type) if f.name != entity_type.key_field]
