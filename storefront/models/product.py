"""Product record as held in the catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from storefront.errors import ProductValidationError

TRUE_STRINGS = {"true", "yes", "1"}
FALSE_STRINGS = {"false", "no", "0"}


def parse_flag(value: Any, name: str) -> bool:
    """Read a boolean field from catalog JSON, where it may arrive as text."""
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
    elif value in (True, False):
        # Also covers numpy booleans coming out of pandas.
        return bool(value)
    raise ProductValidationError(f"{name} must be true or false, got {value!r}")


@dataclass(frozen=True)
class Product:
    """A single catalog entry. Records are immutable; edits publish a new catalog snapshot."""

    id: int
    name: str
    brand: str
    category: str
    price: int
    description: str
    in_stock: bool = True
    featured: bool = False
    specifications: Mapping[str, str] = field(default_factory=dict, hash=False)
    created_at: Optional[str] = None

    def __post_init__(self) -> None:
        # Frozen dataclasses still hand out the mapping; freeze it as well.
        object.__setattr__(self, "specifications", MappingProxyType(dict(self.specifications)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Product":
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            brand=str(data["brand"]),
            category=str(data["category"]),
            price=int(data["price"]),
            description=str(data.get("description", "")),
            in_stock=parse_flag(data.get("inStock", data.get("in_stock", True)), "inStock"),
            featured=parse_flag(data.get("featured", False), "featured"),
            specifications={str(k): str(v) for k, v in (data.get("specifications") or {}).items()},
            created_at=data.get("createdAt", data.get("created_at")),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "category": self.category,
            "price": self.price,
            "description": self.description,
            "inStock": self.in_stock,
            "featured": self.featured,
            "specifications": dict(self.specifications),
        }
        if self.created_at is not None:
            payload["createdAt"] = self.created_at
        return payload
