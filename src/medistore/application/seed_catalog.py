"""Application service: Seed Catalog use case.

Loads the storefront's sample medicines.  Existing products with the
same ids are overwritten, others are left alone.
"""

from __future__ import annotations

from medistore.domain.model.product import Product
from medistore.domain.model.value_objects import Money
from medistore.domain.repository.product_repository import ProductRepository

_IMAGE = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=800&q=80"

SAMPLE_MEDICINES = [
    {
        "id": "m1",
        "name": "Paracetamol 500mg",
        "description": "Pain reliever and fever reducer",
        "price": "49.99",
        "category": "over-the-counter",
        "image": _IMAGE.format("1584308666744-24d5c474f2ae"),
        "stock": 100,
    },
    {
        "id": "m2",
        "name": "Amoxicillin 250mg",
        "description": "Antibiotic for bacterial infections",
        "price": "299.99",
        "category": "prescription",
        "image": _IMAGE.format("1587854692152-cbe660dbde88"),
        "stock": 50,
    },
    {
        "id": "m3",
        "name": "Vitamin D3 60000IU",
        "description": "Weekly vitamin D supplement",
        "price": "199.99",
        "category": "vitamins",
        "image": _IMAGE.format("1577904572082-4b271dcc17ce"),
        "stock": 75,
    },
    {
        "id": "m4",
        "name": "First Aid Kit",
        "description": "Basic first aid supplies",
        "price": "599.99",
        "category": "first aid",
        "image": _IMAGE.format("1583947581924-860bda6a26df"),
        "stock": 30,
    },
    {
        "id": "m5",
        "name": "Digital Thermometer",
        "description": "Accurate temperature measurement",
        "price": "399.99",
        "category": "health devices",
        "image": _IMAGE.format("1584308666744-24d5c474f2ae"),
        "stock": 25,
    },
    {
        "id": "m6",
        "name": "Baby Shampoo",
        "description": "Gentle, tear-free formula",
        "price": "149.99",
        "category": "baby care",
        "image": _IMAGE.format("1584308666744-24d5c474f2ae"),
        "stock": 60,
    },
]


class SeedCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> int:
        """Store every sample product and return how many were written."""
        for raw in SAMPLE_MEDICINES:
            self._product_repo.save(
                Product(
                    id=raw["id"],
                    name=raw["name"],
                    price=Money.of(raw["price"]),
                    image=raw["image"],
                    category=raw["category"],
                    description=raw["description"],
                    stock=raw["stock"],
                )
            )
        return len(SAMPLE_MEDICINES)
