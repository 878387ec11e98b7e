"""Cart aggregate.

A Cart is an ordered, immutable collection of line items keyed by
product id.  Every mutation returns a *new* Cart so the session can
compute the next state, persist it, and only then swap it in.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from medistore.domain.exceptions import ValidationError
from medistore.domain.model.product import Product
from medistore.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class LineItem:
    """One product in a cart.

    ``name``, ``image`` and ``price`` are copied from the catalog when
    the product is first added and are never re-synced.
    """

    id: str
    name: str
    price: Money  # locked at add time
    image: str
    quantity: Quantity

    @staticmethod
    def from_product(product: Product) -> LineItem:
        return LineItem(
            id=product.id,
            name=product.name,
            price=product.price,
            image=product.image,
            quantity=Quantity(1),
        )

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass(frozen=True)
class Cart:
    items: tuple[LineItem, ...] = ()

    def __post_init__(self) -> None:
        ids = [item.id for item in self.items]
        if len(ids) != len(set(ids)):
            raise ValidationError("A cart holds at most one line per product")

    @staticmethod
    def empty() -> Cart:
        return Cart()

    # --- Mutations (return a new Cart) ----------------------------------------

    def with_product_added(self, product: Product) -> Cart:
        """Add one unit of *product*.

        An existing line keeps its position and snapshot and gains one
        unit; a new product is appended with quantity 1.
        """
        if product.id in self:
            return Cart(
                tuple(
                    replace(item, quantity=Quantity(item.quantity.value + 1))
                    if item.id == product.id
                    else item
                    for item in self.items
                )
            )
        return Cart(self.items + (LineItem.from_product(product),))

    def with_quantity(self, product_id: str, quantity: int) -> Cart:
        """Set the quantity of *product_id* exactly.

        Zero or less removes the line.  An unknown id leaves the
        collection as it is.
        """
        if quantity <= 0:
            return Cart(tuple(item for item in self.items if item.id != product_id))
        return Cart(
            tuple(
                replace(item, quantity=Quantity(quantity))
                if item.id == product_id
                else item
                for item in self.items
            )
        )

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        if not self.items:
            return Money.zero()
        result = Money.zero(self.items[0].price.currency)
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def get(self, product_id: str) -> LineItem | None:
        for item in self.items:
            if item.id == product_id:
                return item
        return None

    def __contains__(self, product_id: object) -> bool:
        return any(item.id == product_id for item in self.items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
