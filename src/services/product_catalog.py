# src/services/product_catalog.py

"""Loads product records from the content API into Product objects."""

import asyncio
import logging
from typing import Any

from src.config.settings import Settings
from src.models.product import Product
from src.services.content_client import ContentClient

logger = logging.getLogger("storefront.catalog")


def _as_float(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def parse_record(record: dict[str, Any]) -> Product:
    """Map a single API record into a Product.

    Missing or null fields fall back to empty values rather than
    failing the whole page.
    """
    raw_tags: Any = record.get("tags") or []
    if not isinstance(raw_tags, list):
        raw_tags = [raw_tags]
    return Product(
        id=str(record.get("_id") or ""),
        title=str(record.get("title") or ""),
        price=_as_float(record.get("price")),
        description=str(record.get("description") or ""),
        discount_percentage=_as_float(
            record.get("discountPercentage")
        ),
        image_url=str(record.get("imageUrl") or ""),
        tags=[str(tag) for tag in raw_tags if tag is not None],
    )


def parse_records(records: Any) -> list[Product]:
    """Map a query result (a list of records) into Products."""
    if not isinstance(records, list):
        logger.warning(
            "Expected a list of product records, got %s",
            type(records).__name__,
        )
        return []

    products: list[Product] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning(
                "Skipping product record %d: not an object (%r)",
                index,
                record,
            )
            continue
        products.append(parse_record(record))
    return products


class ProductCatalog:
    """Fetches the product list for the storefront page."""

    def __init__(self, client: ContentClient | None = None) -> None:
        self.settings = Settings()
        self.client = client or ContentClient()

    def close(self) -> None:
        self.client.close()

    async def fetch_products(self) -> list[Product]:
        """Run the product query off the event loop; errors propagate."""
        records: Any = await asyncio.to_thread(
            self.client.fetch, self.settings.PRODUCT_QUERY
        )
        products = parse_records(records)
        logger.info("Fetched %d products", len(products))
        return products

    async def load_products(self) -> list[Product]:
        """Fetch products, logging and swallowing any failure.

        A failed fetch leaves the page with an empty product list.
        """
        try:
            return await self.fetch_products()
        except Exception as exc:
            logger.error(
                "Error fetching products: %s", exc, exc_info=True
            )
            return []
