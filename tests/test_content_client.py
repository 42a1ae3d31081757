# tests/test_content_client.py

"""Tests for the content API client using mocked HTTP responses."""

import json
import unittest
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

from src.config.errors import ContentAPIError
from src.services.content_client import ContentClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _response(status_code: int, body: Any) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = body if isinstance(body, str) else json.dumps(body)
    return resp


class TestContentClient(unittest.TestCase):
    """Query URL construction and response handling."""

    def setUp(self) -> None:
        self.client = ContentClient(
            project_id="6izwqnq7",
            dataset="production",
            api_version="2025-01-14",
            use_cdn=True,
        )
        self.session = MagicMock()
        self.client.session = self.session

    def _load_fixture(self) -> dict[str, Any]:
        with open(FIXTURES_DIR / "sanity_products.json") as f:
            data: dict[str, Any] = json.load(f)
        return data

    def test_cdn_query_url(self) -> None:
        self.assertEqual(
            self.client.query_url,
            "https://6izwqnq7.apicdn.sanity.io"
            "/v2025-01-14/data/query/production",
        )

    def test_live_query_url(self) -> None:
        client = ContentClient(
            project_id="6izwqnq7",
            dataset="staging",
            api_version="2025-01-14",
            use_cdn=False,
        )
        self.assertEqual(
            client.query_url,
            "https://6izwqnq7.api.sanity.io"
            "/v2025-01-14/data/query/staging",
        )

    def test_defaults_come_from_settings(self) -> None:
        client = ContentClient()
        self.assertEqual(client.project_id, client.settings.PROJECT_ID)
        self.assertEqual(client.dataset, client.settings.DATASET)
        self.assertEqual(client.api_version, client.settings.API_VERSION)

    def test_fetch_returns_result_member(self) -> None:
        fixture = self._load_fixture()
        self.session.get.return_value = _response(200, fixture)

        result = self.client.fetch("*[_type == 'product']")

        self.assertEqual(result, fixture["result"])
        self.assertEqual(len(result), 4)

    def test_fetch_sends_query_param(self) -> None:
        self.session.get.return_value = _response(200, {"result": []})

        self.client.fetch("count(*)")

        args, kwargs = self.session.get.call_args
        self.assertEqual(args[0], self.client.query_url)
        self.assertEqual(kwargs["params"], {"query": "count(*)"})
        self.assertEqual(
            kwargs["timeout"], self.client.settings.REQUEST_TIMEOUT
        )

    def test_single_attempt_only(self) -> None:
        self.session.get.return_value = _response(500, "oops")
        with self.assertRaises(ContentAPIError):
            self.client.fetch("*")
        self.assertEqual(self.session.get.call_count, 1)

    def test_http_error_includes_api_description(self) -> None:
        body = {
            "error": {
                "description": "expected '}' following object body",
                "type": "queryParseError",
            }
        }
        self.session.get.return_value = _response(400, body)

        with self.assertRaises(ContentAPIError) as ctx:
            self.client.fetch("*[")

        self.assertIn("HTTP 400", str(ctx.exception))
        self.assertIn("following object body", str(ctx.exception))

    def test_transport_error_wrapped(self) -> None:
        self.session.get.side_effect = ConnectionError("refused")
        with self.assertRaises(ContentAPIError) as ctx:
            self.client.fetch("*")
        self.assertIn("refused", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, ConnectionError)

    def test_invalid_json_raises(self) -> None:
        self.session.get.return_value = _response(200, "<html>nope</html>")
        with self.assertRaises(ContentAPIError):
            self.client.fetch("*")

    def test_missing_result_raises(self) -> None:
        self.session.get.return_value = _response(200, {"ms": 3})
        with self.assertRaises(ContentAPIError):
            self.client.fetch("*")

    def test_close_releases_session(self) -> None:
        self.client.close()
        self.session.close.assert_called_once()

    def test_ping_returns_count(self) -> None:
        self.session.get.return_value = _response(200, {"result": 12})
        self.assertEqual(self.client.ping(), 12)
        _, kwargs = self.session.get.call_args
        self.assertEqual(
            kwargs["params"]["query"], self.client.settings.PING_QUERY
        )


if __name__ == "__main__":
    unittest.main()
