from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field

from storefront.models.product import Product
from storefront.utils.text import format_brand, format_category, format_price, format_spec_key


class ProductCreate(BaseModel):
    name: str
    brand: str
    category: str
    price: int = Field(..., ge=0)
    description: str


class Specification(BaseModel):
    key: str
    label: str
    value: str


class ProductOut(BaseModel):
    id: int
    name: str
    brand: str
    brand_label: str
    category: str
    category_label: str
    price: int
    price_label: str
    description: str
    in_stock: bool
    featured: bool
    specifications: List[Specification] = Field(default_factory=list)
    created_at: Optional[str] = None

    @classmethod
    def from_product(cls, product: Product) -> "ProductOut":
        return cls(
            id=product.id,
            name=product.name,
            brand=product.brand,
            brand_label=format_brand(product.brand),
            category=product.category,
            category_label=format_category(product.category),
            price=product.price,
            price_label=format_price(product.price),
            description=product.description,
            in_stock=product.in_stock,
            featured=product.featured,
            specifications=[
                Specification(key=key, label=format_spec_key(key), value=value)
                for key, value in product.specifications.items()
            ],
            created_at=product.created_at,
        )


class CatalogPage(BaseModel):
    products: List[ProductOut]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_more: bool
    summary: str
    message: Optional[str] = None
    version: int
