# tests/test_formatting.py

"""Tests for the display helpers."""

import unittest

from src.config.settings import Settings
from src.models.product import Product
from src.ui.formatting import (
    format_discount,
    format_price,
    image_source,
    truncate_description,
)


class TestTruncateDescription(unittest.TestCase):
    """Description truncation at the 100 character boundary."""

    def test_exactly_100_chars_untouched(self) -> None:
        text = "x" * 100
        self.assertEqual(truncate_description(text), text)

    def test_101_chars_cut_to_100_plus_ellipsis(self) -> None:
        text = "y" * 101
        result = truncate_description(text)
        self.assertEqual(result, "y" * 100 + "...")
        self.assertEqual(len(result), 103)

    def test_short_text_untouched(self) -> None:
        self.assertEqual(truncate_description("Short."), "Short.")

    def test_empty_text(self) -> None:
        self.assertEqual(truncate_description(""), "")

    def test_custom_limit(self) -> None:
        self.assertEqual(truncate_description("abcdef", 3), "abc...")

    def test_never_longer_than_limit_plus_ellipsis(self) -> None:
        for length in (0, 50, 99, 100, 101, 500):
            with self.subTest(length=length):
                result = truncate_description("z" * length)
                self.assertLessEqual(len(result), 103)


class TestPriceAndDiscount(unittest.TestCase):
    """Price and discount labels."""

    def test_price_two_decimals(self) -> None:
        self.assertEqual(format_price(29), "$29.00")
        self.assertEqual(format_price(249.999), "$250.00")

    def test_positive_discount(self) -> None:
        self.assertEqual(format_discount(15.0), "15% off")
        self.assertEqual(format_discount(12.5), "12.5% off")

    def test_zero_discount_hidden(self) -> None:
        self.assertEqual(format_discount(0), "")
        self.assertEqual(format_discount(-3), "")


class TestImageSource(unittest.TestCase):
    """Image URL or fallback."""

    def _product(self, image_url: str) -> Product:
        return Product(id="p", title="P", price=1.0, image_url=image_url)

    def test_sanity_cdn_url_kept(self) -> None:
        url = "https://cdn.sanity.io/images/proj/production/a.jpg"
        self.assertEqual(image_source(self._product(url)), url)

    def test_missing_url_uses_fallback(self) -> None:
        self.assertEqual(
            image_source(self._product("")),
            Settings.FALLBACK_IMAGE_URL,
        )

    def test_unlisted_host_uses_fallback(self) -> None:
        self.assertEqual(
            image_source(self._product("https://evil.example/a.jpg")),
            Settings.FALLBACK_IMAGE_URL,
        )


if __name__ == "__main__":
    unittest.main()
