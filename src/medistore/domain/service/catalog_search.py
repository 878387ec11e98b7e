"""Domain service: catalog search.

Filtering rules for the storefront: a category match (``"all"``
disables it) combined with a case-insensitive name substring.
"""

from __future__ import annotations

from medistore.domain.model.product import Product

ALL_CATEGORIES = "all"


def filter_products(
    products: list[Product],
    category: str = ALL_CATEGORIES,
    search: str = "",
) -> list[Product]:
    needle = search.strip().lower()
    return [
        p
        for p in products
        if (category == ALL_CATEGORIES or p.category == category)
        and needle in p.name.lower()
    ]


def categories(products: list[Product]) -> list[str]:
    """Return ``"all"`` followed by each category once, in catalog order."""
    seen: list[str] = []
    for p in products:
        if p.category and p.category not in seen:
            seen.append(p.category)
    return [ALL_CATEGORIES, *seen]
