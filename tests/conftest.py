# tests/conftest.py

"""Shared pytest setup for the storefront tests."""

import os
from collections.abc import Generator
from unittest.mock import patch

import pytest

# Settings asserts these at import time.
os.environ.setdefault("SANITY_PROJECT_ID", "testproject")
os.environ.setdefault("SANITY_DATASET", "testing")


@pytest.fixture(autouse=True)
def block_network() -> Generator[None, None, None]:
    """Make any unmocked content API session fail instead of going online."""
    with patch(
        "src.services.content_client.curl_requests.Session"
    ) as mock_session_cls:
        mock_session_cls.return_value.get.side_effect = ConnectionError(
            "network disabled in tests"
        )
        yield
