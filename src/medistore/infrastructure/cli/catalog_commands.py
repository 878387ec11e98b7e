"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from medistore.application.browse_catalog import BrowseCatalogHandler
from medistore.application.seed_catalog import SeedCatalogHandler
from medistore.domain.service.catalog_search import ALL_CATEGORIES
from medistore.infrastructure.bootstrap import product_repository


@click.command("list")
@click.option("--category", default=ALL_CATEGORIES, show_default=True, help="Category filter.")
@click.option("--search", default="", help="Part of the product name.")
def catalog_list(category: str, search: str) -> None:
    """List products in the catalog."""
    dto = BrowseCatalogHandler(product_repo=product_repository()).handle(
        category=category, search=search
    )

    if not dto.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Category':<18} {'Price':>10}")
    click.echo("-" * 61)
    for p in dto.products:
        stock = "" if p.in_stock else "  (out of stock)"
        click.echo(f"{p.id:<6} {p.name:<24} {p.category:<18} {p.price:>10}{stock}")
    click.echo()
    click.echo("Categories: " + ", ".join(dto.categories))


@click.command("seed")
def catalog_seed() -> None:
    """Load the sample medicines into the catalog."""
    count = SeedCatalogHandler(product_repo=product_repository()).handle()
    click.echo(f"Seeded {count} products.")
