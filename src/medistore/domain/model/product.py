"""Product aggregate.

Products live in the storefront catalog independently of any cart.
A cart copies the name, image and price at add time, so later catalog
edits never reach items already in a cart.
"""

from __future__ import annotations

from dataclasses import dataclass

from medistore.domain.exceptions import ValidationError
from medistore.domain.model.value_objects import Money


@dataclass
class Product:
    """A medicine or health product in the catalog."""

    id: str
    name: str
    price: Money
    image: str = ""
    category: str = ""
    description: str = ""
    stock: int = 0

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Product id is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        if self.stock < 0:
            raise ValidationError("Product stock cannot be negative")

    @property
    def in_stock(self) -> bool:
        return self.stock > 0
