# src/models/cart.py

"""In-memory shopping cart for a single session."""

import copy
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from src.models.product import Product

logger = logging.getLogger("storefront.cart")


@dataclass
class Cart:
    """Ordered, append-only list of product copies.

    Nothing is deduplicated: adding the same product twice stores it
    twice. The cart lives only as long as the session that owns it.
    """

    items: list[Product] = field(
        default_factory=lambda: list[Product]()
    )

    def add(self, product: Product) -> Product:
        """Append a copy of *product* and return the stored copy."""
        entry = copy.deepcopy(product)
        self.items.append(entry)
        logger.info(
            "Added '%s' (id=%s) to cart - %d item(s)",
            product.title,
            product.id,
            len(self.items),
        )
        return entry

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.items)
