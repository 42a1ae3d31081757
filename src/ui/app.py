# src/ui/app.py

"""Terminal UI for the storefront: product grid plus cart summary."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Vertical, VerticalScroll
from textual.widgets import (
    Button,
    Footer,
    Header,
    LoadingIndicator,
    Static,
)

from src.models.cart import Cart
from src.models.product import Product
from src.services.product_catalog import ProductCatalog
from src.ui.widgets import CartLine, ProductCard

logger = logging.getLogger("storefront.ui")

EMPTY_CART_TEXT = "Your cart is empty, please add products"


class StorefrontApp(App[object]):
    """Product listing page with an in-memory cart."""

    CSS_PATH = "styles.css"
    TITLE = "Storefront"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, catalog: ProductCatalog | None = None) -> None:
        super().__init__()
        self.catalog = catalog or ProductCatalog()
        self.products: list[Product] = []
        self.cart = Cart()
        self.is_loading: bool = True

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        yield Header()
        yield VerticalScroll(
            Static("Products From Api's Data", id="title"),
            LoadingIndicator(id="loader"),
            Static("Loading...", id="status"),
            Grid(id="product_grid"),
            Vertical(
                Static("Cart Summary", id="cart_heading"),
                Static(EMPTY_CART_TEXT, id="cart_empty"),
                Vertical(id="cart_items"),
                id="cart_summary",
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Start the product fetch as soon as the page is up."""
        self._set_loading(True)
        self.run_worker(
            self.load_products(), name="load_products", exclusive=True
        )

    def on_unmount(self) -> None:
        """Release the content API session when the UI exits."""
        self.catalog.close()

    def _set_loading(self, loading: bool) -> None:
        self.is_loading = loading
        self.query_one("#loader", LoadingIndicator).display = loading
        self.query_one("#product_grid", Grid).display = not loading

    async def load_products(self) -> None:
        """Fetch products once and render the grid."""
        products = await self.catalog.load_products()
        self.products = products
        await self.populate_grid()
        self._set_loading(False)
        logger.info("Rendered %d product cards", len(products))

        status = self.query_one("#status", Static)
        if products:
            status.update(f"{len(products)} products")
        else:
            status.update("❌ No products found")

    async def populate_grid(self) -> None:
        """Mount one card per loaded product."""
        grid = self.query_one("#product_grid", Grid)
        await grid.remove_children()
        if self.products:
            await grid.mount_all(
                ProductCard(product, index)
                for index, product in enumerate(self.products)
            )

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle Add to Cart clicks."""
        button_id = event.button.id or ""
        if not button_id.startswith("add_"):
            return
        index = int(button_id.removeprefix("add_"))
        if 0 <= index < len(self.products):
            await self.add_to_cart(self.products[index])

    async def add_to_cart(self, product: Product) -> None:
        """Append *product* to the cart and show it in the summary."""
        entry = self.cart.add(product)
        self.notify(f"{product.title} added to cart")

        self.query_one("#cart_empty", Static).display = False
        await self.query_one("#cart_items", Vertical).mount(
            CartLine(entry)
        )
