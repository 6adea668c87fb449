"""
Product catalogue contracts.

Shapes returned by the DummyJSON products API:
- GET /products       -> ProductListEnvelope {"products": [...], "total", "skip", "limit"}
- GET /products/{id}  -> Product

Only `id` is validated. Every other field (title, price, description,
category, images, ...) is passed through exactly as upstream sent it.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    title: Any = None
    price: Any = None

    def to_payload(self) -> Dict[str, Any]:
        # Only what upstream sent; unset optional fields are not invented.
        return self.model_dump(exclude_unset=True)


class ProductListEnvelope(BaseModel):
    products: List[Product] = Field(default_factory=list)
    total: int = 0
    skip: int = 0
    limit: int = 0
