# src/config/errors.py

"""Exception hierarchy for the storefront."""


class StorefrontError(Exception):
    """Base exception for the project."""


class MissingConfigError(StorefrontError):
    """Raised at import time when a required setting is absent."""


class ContentAPIError(StorefrontError):
    """Raised when the content API call fails or returns an unusable body."""
