# src/models/product.py

"""Product data model for inter-module data flow."""

from dataclasses import dataclass, field


@dataclass
class Product:
    """A content record describing an item for sale."""

    id: str
    title: str
    price: float
    description: str = ""
    discount_percentage: float = 0.0
    image_url: str = ""
    tags: list[str] = field(default_factory=lambda: list[str]())

    @property
    def has_discount(self) -> bool:
        return self.discount_percentage > 0
