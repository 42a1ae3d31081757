# src/config/settings.py

"""Central configuration for the storefront."""

import os
from pathlib import Path
from typing import TypeVar

from dotenv import load_dotenv

from src.config.errors import MissingConfigError

load_dotenv()

T = TypeVar("T")


def assert_value(value: T | None, error_message: str) -> T:
    """Return *value*, or raise :class:`MissingConfigError` if it is unset.

    Blank strings count as unset.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingConfigError(error_message)
    return value


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag such as ``SANITY_USE_CDN=false``."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


# --- Required content API coordinates (checked at import) ---
API_VERSION: str = assert_value(
    os.getenv("SANITY_API_VERSION", "2025-01-14"),
    "Missing environment variable: SANITY_API_VERSION",
)

DATASET: str = assert_value(
    os.getenv("SANITY_DATASET"),
    "Missing environment variable: SANITY_DATASET",
)

PROJECT_ID: str = assert_value(
    os.getenv("SANITY_PROJECT_ID"),
    "Missing environment variable: SANITY_PROJECT_ID",
)


class Settings:
    """Central configuration for the storefront."""

    # --- Content API ---
    API_VERSION: str = API_VERSION
    DATASET: str = DATASET
    PROJECT_ID: str = PROJECT_ID
    USE_CDN: bool = _env_flag("SANITY_USE_CDN", True)
    REQUEST_TIMEOUT: int = 15           # Seconds before the fetch times out
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
        "User-Agent": "storefront/1.0",
    }

    # --- Queries (GROQ) ---
    PRODUCT_QUERY: str = (
        '*[_type == "product"]{'
        "_id, title, price, description, discountPercentage, "
        '"imageUrl": productImage.asset->url, tags'
        "}"
    )
    PING_QUERY: str = 'count(*[_type == "product"])'

    # --- Display ---
    DESCRIPTION_MAX_LENGTH: int = 100
    FALLBACK_IMAGE_URL: str = "/fallback-image.jpg"
    IMAGE_DOMAINS: list[str] = ["cdn.sanity.io"]

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
