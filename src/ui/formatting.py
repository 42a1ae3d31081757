# src/ui/formatting.py

"""Display helpers shared by the TUI and the headless CLI."""

import logging
from urllib.parse import urlparse

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("storefront.ui")

ELLIPSIS = "..."


def truncate_description(
    description: str,
    max_length: int = Settings.DESCRIPTION_MAX_LENGTH,
) -> str:
    """Cut *description* to *max_length* characters plus an ellipsis.

    Text at or under the limit is returned unchanged.
    """
    if len(description) > max_length:
        return description[:max_length] + ELLIPSIS
    return description


def format_price(price: float) -> str:
    return f"${price:.2f}"


def format_discount(discount_percentage: float) -> str:
    """``"15% off"`` for a positive discount, otherwise an empty string."""
    if discount_percentage <= 0:
        return ""
    return f"{discount_percentage:g}% off"


def image_source(product: Product) -> str:
    """Image URL to show for *product*, or the fallback image.

    Only hosts listed in ``Settings.IMAGE_DOMAINS`` are served.
    """
    url = product.image_url
    if not url:
        return Settings.FALLBACK_IMAGE_URL
    host = urlparse(url).hostname or ""
    if host not in Settings.IMAGE_DOMAINS:
        logger.debug(
            "Image host '%s' not allowed for product %s",
            host,
            product.id,
        )
        return Settings.FALLBACK_IMAGE_URL
    return url
