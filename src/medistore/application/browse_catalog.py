"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

from medistore.application.dto import CatalogDTO, ProductDTO
from medistore.domain.repository.product_repository import ProductRepository
from medistore.domain.service.catalog_search import ALL_CATEGORIES, categories, filter_products


class BrowseCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, category: str = ALL_CATEGORIES, search: str = "") -> CatalogDTO:
        products = self._product_repo.list_all()
        return CatalogDTO(
            products=[
                ProductDTO.from_domain(p)
                for p in filter_products(products, category=category, search=search)
            ],
            categories=categories(products),
        )
