# src/cli/runner.py

"""Headless CLI: print the product list or probe the content API."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.models.product import Product
from src.services.health_checker import HealthChecker
from src.services.product_catalog import ProductCatalog
from src.ui.formatting import (
    format_discount,
    format_price,
    image_source,
    truncate_description,
)

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _products_to_dicts(products: list[Product]) -> list[dict[str, object]]:
    """Serialise a product list to plain dicts for JSON output."""
    return [
        {
            "id": p.id,
            "title": p.title,
            "price": p.price,
            "description": p.description,
            "discount_percentage": p.discount_percentage,
            "image_url": p.image_url,
            "image_source": image_source(p),
            "tags": list(p.tags),
        }
        for p in products
    ]


def _print_table(products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title="Products",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", max_width=40)
    table.add_column("Description", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Discount", justify="center")
    table.add_column("Tags", style="magenta")

    for idx, p in enumerate(products, 1):
        table.add_row(
            str(idx),
            p.title,
            truncate_description(p.description),
            format_price(p.price),
            format_discount(p.discount_percentage) or "—",
            ", ".join(p.tags),
        )

    Console().print(table)


async def cli_list(
    output_format: str,
    catalog: ProductCatalog | None = None,
) -> int:
    """Fetch the product list and print it; exit code 0=ok, 1=empty."""
    catalog = catalog or ProductCatalog()
    _err.print("[bold]Fetching products...[/bold]")

    try:
        products = await catalog.load_products()
    finally:
        catalog.close()

    if not products:
        _err.print("[yellow]No products found.[/yellow]")
        return 1

    _err.print(f"[green]✓ {len(products)} products[/green]")
    logger.info(
        "Listing %d products as %s", len(products), output_format
    )

    if output_format == "table":
        _print_table(products)
    else:
        json.dump(
            _products_to_dicts(products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0


async def run_health_check(checker: HealthChecker | None = None) -> int:
    """Probe the content API and print the outcome."""
    checker = checker or HealthChecker()
    _err.print("[bold]Running content API health check...[/bold]")
    try:
        r = await checker.check()
    finally:
        checker.close()

    table = Table(
        title="Content API Health Check",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Endpoint", style="bold", overflow="fold")
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Products", justify="right")
    table.add_column("Notes", style="dim")

    if r.status == "ok":
        status = "[green]✅ OK[/green]"
    elif r.status == "slow":
        status = "[yellow]⚠️  SLOW[/yellow]"
    else:
        status = "[red]❌ DOWN[/red]"

    latency = f"{r.latency_ms:.0f}ms" if r.latency_ms > 0 else "—"
    table.add_row(
        r.endpoint,
        status,
        latency,
        str(r.product_count) if r.status != "down" else "—",
        r.message,
    )

    Console().print(table)
    return 1 if r.status == "down" else 0
