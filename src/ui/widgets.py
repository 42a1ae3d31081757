# src/ui/widgets.py

"""Widgets for the product grid and cart summary."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Label, Static

from src.models.product import Product
from src.ui.formatting import (
    format_discount,
    format_price,
    image_source,
    truncate_description,
)


class ProductCard(Vertical):
    """One product in the grid, with its Add to Cart button."""

    def __init__(self, product: Product, index: int) -> None:
        super().__init__(classes="product_card")
        self.product = product
        self.index = index
        self.description_text = truncate_description(product.description)

    def compose(self) -> ComposeResult:
        p = self.product
        yield Static(
            Text(f"🖼  {image_source(p)}", style="dim"),
            classes="card_image",
        )
        yield Static(Text(p.title, style="bold"), classes="card_title")
        yield Static(
            Text(self.description_text), classes="card_description"
        )
        with Horizontal(classes="card_pricing"):
            yield Static(
                Text(format_price(p.price), style="bold"),
                classes="card_price",
            )
            if p.has_discount:
                yield Static(
                    Text(format_discount(p.discount_percentage)),
                    classes="card_discount",
                )
        with Horizontal(classes="card_tags"):
            for tag in p.tags:
                yield Label(Text(tag), classes="tag")
        yield Button(
            "Add to Cart", variant="primary", id=f"add_{self.index}"
        )


class CartLine(Horizontal):
    """A single entry in the cart summary."""

    def __init__(self, product: Product) -> None:
        super().__init__(classes="cart_line")
        self.product = product
        self.image_text = image_source(product)

    def compose(self) -> ComposeResult:
        yield Static(
            Text(self.product.title, style="bold"),
            classes="cart_line_title",
        )
        yield Static(
            Text(format_price(self.product.price), style="blue"),
            classes="cart_line_price",
        )
        yield Static(
            Text(f"🖼  {self.image_text}", style="dim"),
            classes="cart_line_image",
        )
